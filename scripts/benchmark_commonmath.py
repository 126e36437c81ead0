import argparse as ap
import logging
from timeit import timeit

import numpy as np
import torch
from spatialmath import SO3

from continuum_robot_math import commonmath
from continuum_robot_math.pytorch import geometry

avgtimeit = lambda f, number: timeit( f, number=int( number ) ) / int( number )


def __parse_args( args=None ):
    parser = ap.ArgumentParser(
            "Script to benchmark the SO(3) math functions"
    )

    parser.add_argument(
            "--number",
            type=int,
            default=10000,
            help="Number of calls to average each function over",
    )
    parser.add_argument(
            "--batch-size",
            type=int,
            default=1000,
            help="Number of rotations in a batch for the torch functions",
    )

    ARGS = parser.parse_args( args )

    logging.getLogger().setLevel( logging.INFO )

    return ARGS


# __parse_args

def benchmark_numpy( number: int ):
    R1, R2 = SO3.Rand().A, SO3.Rand().A
    v = np.array( [ 0.1, -0.2, 0.3 ] )
    V = commonmath.hat( v )

    test_fns = {
        "hat"                  : lambda: commonmath.hat( v ),
        "inv_hat"              : lambda: commonmath.inv_hat( V ),
        "matrix_log"           : lambda: commonmath.matrix_log( R1 ),
        "rotation_error"       : lambda: commonmath.rotation_error( R1, R2 ),
        "linear_rotation_error": lambda: commonmath.linear_rotation_error( R1, R2 ),
    }

    for name, fn in test_fns.items():
        tavg_cost = avgtimeit( fn, number )
        logging.log( logging.INFO, f"numpy {name:22s}: {tavg_cost * 1e6:.3f} us/call" )

    # for


# benchmark_numpy

def benchmark_torch( number: int, batch_size: int ):
    R1 = torch.from_numpy( np.stack( [ SO3.Rand().A for _ in range( batch_size ) ] ) )
    R2 = torch.from_numpy( np.stack( [ SO3.Rand().A for _ in range( batch_size ) ] ) )
    w = torch.randn( batch_size, 3, dtype=R1.dtype )
    W = geometry.hat( w )

    test_fns = {
        "hat"                  : lambda: geometry.hat( w ),
        "inv_hat"              : lambda: geometry.inv_hat( W ),
        "matrix_log"           : lambda: geometry.matrix_log( R1 ),
        "rotation_error"       : lambda: geometry.rotation_error( R1, R2 ),
        "linear_rotation_error": lambda: geometry.linear_rotation_error( R1, R2 ),
    }

    for name, fn in test_fns.items():
        tavg_cost = avgtimeit( fn, number )
        logging.log(
                logging.INFO,
                f"torch {name:22s}: {tavg_cost * 1e3:.3f} ms/batch | {tavg_cost / batch_size * 1e6:.3f} us/rotation"
        )

    # for


# benchmark_torch

def main( args=None ):
    ARGS = __parse_args( args )

    logging.log( logging.INFO, f"Benchmarking numpy functions ({ARGS.number} calls)" )
    benchmark_numpy( ARGS.number )

    number_batches = max( 1, ARGS.number // 100 )
    logging.log( logging.INFO, f"Benchmarking torch functions ({number_batches} batches of {ARGS.batch_size})" )
    benchmark_torch( number_batches, ARGS.batch_size )


# main

if __name__ == "__main__":
    main()
