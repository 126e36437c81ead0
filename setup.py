from setuptools import setup, find_packages

setup(
        name='continuum-robot-math',
        version='0.1.0',
        packages=find_packages( exclude=[ 'tests', 'tests.*', 'scripts' ] ),
        description='SO(3) / so(3) math library for continuum robot modelling',
        long_description=open( 'README.md' ).read(),
        long_description_content_type='text/markdown',
        python_requires='>=3.8',
        install_requires=[
                'numpy',
                'spatialmath-python',
                'torch',
                ],
        extras_require={
                'test': [ 'pytest' ],
                },
        classifiers=[
                'Operating System :: OS Independent',
                'License :: OSI Approved :: MIT License'
                ]
        )
