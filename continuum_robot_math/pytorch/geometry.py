import logging

import torch

from continuum_robot_math import commonmath

logger = logging.getLogger( __name__ )


def hat( w ):
    """ Skewify R^3 tensor

    Args:
        w - (..., 3)

    Return:
        W - (..., 3, 3) skew-symmetric matrix

    """
    zeros = torch.zeros_like( w[ ..., 0:1 ] )
    W_half = torch.cat(
            (
                    zeros, -w[ ..., 2:3 ], w[ ..., 1:2 ],
                    zeros, zeros, -w[ ..., 0:1 ],
                    zeros, zeros, zeros,
            ),
            dim=-1
    ).reshape( *w.shape[ :-1 ], 3, 3 )

    return W_half - W_half.transpose( -1, -2 )


# hat

def inv_hat( W ):
    """ Vectorize so(3) tensor (skew-symmetry is not checked)

    Args:
        W - (..., 3, 3) skew-symmetric matrix

    Return:
        w - (..., 3) [ W[2, 1], W[0, 2], W[1, 0] ]

    """
    return torch.stack( (W[ ..., 2, 1 ], W[ ..., 0, 2 ], W[ ..., 1, 0 ]), dim=-1 )


# inv_hat

def matrix_log( R, zero_at_identity: bool = False ):
    """ Principal logarithm of SO(3) tensor

    Args:
        R - (..., 3, 3) rotation matrices
        zero_at_identity - (Default = False) return zero instead of identity where theta == 0

    Return:
        (..., 3, 3) so(3) matrices. Identity matrices where the rotation angle is 0.

    """
    trace = R.diagonal( dim1=-2, dim2=-1 ).sum( dim=-1 )
    thetas = torch.acos( torch.clamp( (trace - 1) / 2, -1.0, 1.0 ) )

    is_zero = thetas == 0
    sins = torch.where( is_zero, torch.ones_like( thetas ), torch.sin( thetas ) )
    scale = (thetas / (2 * sins))[ ..., None, None ]

    W = scale * (R - R.transpose( -1, -2 ))

    if zero_at_identity:
        at_zero = torch.zeros_like( R )

    else:
        at_zero = torch.eye( 3, dtype=R.dtype, device=R.device ).expand_as( R )

    if logger.isEnabledFor( logging.DEBUG ):
        if bool( is_zero.any() ):
            logger.debug( f"matrix_log: {int( is_zero.sum() )} zero rotation angle(s)" )

        at_pi = (sins.abs() < commonmath.SINGULARITY_TOL) & ~is_zero
        if bool( at_pi.any() ):
            logger.debug( f"matrix_log: {int( at_pi.sum() )} rotation angle(s) at the pi singularity" )

    # if

    return torch.where( is_zero[ ..., None, None ], at_zero, W )


# matrix_log

def rotation_error( R1, R2, zero_at_identity: bool = False ):
    """ Axis-angle difference between SO(3) tensors

    Args:
        R1 - (..., 3, 3) rotation matrices
        R2 - (..., 3, 3) rotation matrices

    Return:
        (..., 3) inv_hat( log( R1^T R2 ) )

    """
    return inv_hat( matrix_log( R1.transpose( -1, -2 ) @ R2, zero_at_identity=zero_at_identity ) )


# rotation_error

def linear_rotation_error( R1, R2 ):
    """ Linearized difference between SO(3) tensors (zero for some 180 degree rotations)

    Args:
        R1 - (..., 3, 3) rotation matrices
        R2 - (..., 3, 3) rotation matrices

    Return:
        (..., 3) inv_hat( R1^T R2 - R1 R2^T )

    """
    return inv_hat( R1.transpose( -1, -2 ) @ R2 - R1 @ R2.transpose( -1, -2 ) )

# linear_rotation_error
