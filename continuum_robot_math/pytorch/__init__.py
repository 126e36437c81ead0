from continuum_robot_math.pytorch import geometry
