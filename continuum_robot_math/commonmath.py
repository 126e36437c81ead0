"""

Library of common SO(3) / so(3) math for continuum robot modelling.

Rotation matrices are 3x3 numpy arrays, so(3) elements are 3x3 skew-symmetric
numpy arrays and vectors are numpy arrays of size 3.

"""
import logging

from typing import Union

import numpy as np
from spatialmath import SO3

logger = logging.getLogger( __name__ )

pi = 3.14159265358979323846

# sin(theta) below this is reported as the near-pi singularity of the logarithm
SINGULARITY_TOL = 1e-8


def _as_vector3( v ) -> np.ndarray:
    v = np.asarray( v, dtype=float ).ravel()
    if v.size != 3:
        raise IndexError( f"Expected a vector of size 3, got size {v.size}." )

    return v


# _as_vector3

def _as_matrix3( X ) -> np.ndarray:
    X = np.asarray( X, dtype=float )
    if X.shape != (3, 3):
        raise IndexError( f"Expected a 3x3 matrix, got shape {X.shape}." )

    return X


# _as_matrix3

def hat( v: Union[ list, np.ndarray ] ) -> np.ndarray:
    """ Map a vector in R^3 to its 3x3 skew-symmetric matrix in so(3)

        hat(v) @ u == np.cross(v, u) for any u

        Args:
            v: vector of size 3

        Returns:
            3x3 so(3) element
            [[    0, -v[2],  v[1] ],
             [  v[2],    0, -v[0] ],
             [ -v[1],  v[0],    0 ]]

    """
    v = _as_vector3( v )

    V = np.zeros( (3, 3) )
    V[ 0, 1 ] = -v[ 2 ]
    V[ 0, 2 ] = v[ 1 ]
    V[ 1, 2 ] = -v[ 0 ]

    V -= V.T

    return V


# hat

def inv_hat( V: np.ndarray, validate: bool = False ) -> np.ndarray:
    """ Map a 3x3 skew-symmetric matrix in so(3) back to R^3

        Only the entries below the diagonal are read. V is not checked for skew-symmetry
        unless `validate` is set, so a non-skew input silently returns a meaningless vector.

        Args:
            V: 3x3 so(3) array
            validate: raise a ValueError if V is not skew-symmetric

        Returns:
            [ V[ 2, 1 ], V[ 0, 2 ], V[ 1, 0 ] ]

    """
    V = _as_matrix3( V )

    if validate and not is_skewsymm( V ):
        raise ValueError( "'V' is not skew-symmetric." )

    return np.array( [ V[ 2, 1 ], V[ 0, 2 ], V[ 1, 0 ] ] )


# inv_hat

def matrix_log( R: np.ndarray, validate: bool = False, zero_at_identity: bool = False ) -> np.ndarray:
    """ Compute the principal logarithm of a rotation matrix

        theta = arccos( (tr(R) - 1) / 2 ) and log(R) = theta / (2 sin(theta)) * (R - R^T),
        which is hat(theta * axis).

        Edge cases:
            - theta == 0: returns the 3x3 identity (NOT the zero matrix) unless
              `zero_at_identity` is set.
            - theta -> pi: sin(theta) -> 0 and the result is not mitigated. Inputs near a
              180 degree rotation should be avoided or handled by the caller.

        Args:
            R: 3x3 rotation matrix
            validate: raise a ValueError if R is not in SO(3)
            zero_at_identity: return the zero matrix for theta == 0

        Returns:
            3x3 so(3) element

    """
    R = _as_matrix3( R )

    if validate and not is_SO3( R ):
        raise ValueError( "'R' is not a rotation matrix." )

    # trace drift outside of [-1, 3] is floating-point error
    cos_theta = np.clip( (np.trace( R ) - 1) / 2, -1.0, 1.0 )
    theta = float( np.arccos( cos_theta ) )

    if theta == 0:
        logger.debug( "matrix_log: zero rotation angle" )
        return np.zeros( (3, 3) ) if zero_at_identity else np.eye( 3 )

    # if

    sin_theta = np.sin( theta )
    if abs( sin_theta ) < SINGULARITY_TOL:
        logger.debug( f"matrix_log: rotation angle {theta} is at the pi singularity" )

    return theta / (2 * sin_theta) * (R - R.T)


# matrix_log

def rotation_error(
        R1: np.ndarray, R2: np.ndarray, validate: bool = False, zero_at_identity: bool = False
) -> np.ndarray:
    """ Quantify the difference between two rotation matrices as a 3-vector

        inv_hat( log( R1^T R2 ) ), the axis (in R1's frame) scaled by the angle rotating R1 onto R2.

        rotation_error(R, R) is the zero vector, since the identity has no off-diagonal entries.
        Inherits the pi singularity of `matrix_log`.

        Args:
            R1: 3x3 rotation matrix
            R2: 3x3 rotation matrix
            validate: raise a ValueError if either matrix is not in SO(3)
            zero_at_identity: passed on to `matrix_log`

        Returns:
            axis-angle vector of R1^T R2

    """
    R1 = _as_matrix3( R1 )
    R2 = _as_matrix3( R2 )

    if validate and not (is_SO3( R1 ) and is_SO3( R2 )):
        raise ValueError( "'R1' and 'R2' must be rotation matrices." )

    return inv_hat( matrix_log( R1.T @ R2, zero_at_identity=zero_at_identity ) )


# rotation_error

def linear_rotation_error( R1: np.ndarray, R2: np.ndarray, validate: bool = False ) -> np.ndarray:
    """ A linearized metric for the distance between two rotation matrices

        inv_hat( R1^T R2 - R1 R2^T ). No trigonometric functions and no singularity, but it is
        only accurate for small relative rotations.

        Warning: the result is the zero vector for some 180 degree relative rotations
        (e.g. R1 = I, R2 = rotz(pi)) even though R1 != R2.

        Args:
            R1: 3x3 rotation matrix
            R2: 3x3 rotation matrix
            validate: raise a ValueError if either matrix is not in SO(3)

        Returns:
            linearized rotation error vector

    """
    R1 = _as_matrix3( R1 )
    R2 = _as_matrix3( R2 )

    if validate and not (is_SO3( R1 ) and is_SO3( R2 )):
        raise ValueError( "'R1' and 'R2' must be rotation matrices." )

    return inv_hat( R1.T @ R2 - R1 @ R2.T )


# linear_rotation_error

def is_skewsymm( X: np.ndarray, atol: float = 0 ) -> bool:
    """ Determine if a matrix is skew-symmetric (within `atol`)"""
    X = np.asarray( X )

    return X.ndim == 2 and X.shape[ 0 ] == X.shape[ 1 ] and bool( np.all( np.abs( X + X.T ) <= atol ) )


# is_skewsymm

def is_so3( X: np.ndarray, atol: float = 0 ) -> bool:
    """ Criteria for so(3) matrix

        - 3x3 matrix
        - skew-symmetric

    """

    return np.shape( X ) == (3, 3) and is_skewsymm( X, atol=atol )


# is_so3

def is_SO3( R: np.ndarray ) -> bool:
    """ Determine if R is an element of SO(3) (orthogonal, determinant +1)"""
    if np.shape( R ) != (3, 3):
        return False

    try:
        R = np.asarray( R, dtype=float )
        SO3( R, check=True )
        retval = bool( np.linalg.det( R ) > 0 )

    except ValueError:
        retval = False

    return retval


# is_SO3

def rodrigues( w: Union[ list, np.ndarray ] ) -> np.ndarray:
    """ Compute the rodrigues formula for the vector (exponential of hat(w))

        :param w: 3D vector of rotation

        :return: 3x3 Rotation matrix

    """
    w = _as_vector3( w )

    theta = np.linalg.norm( w )
    if theta == 0:
        return np.eye( 3 )

    K = hat( w / theta )

    return np.eye( 3 ) + np.sin( theta ) * K + (1 - np.cos( theta )) * (K @ K)


# rodrigues

def rotx( t: float ) -> np.ndarray:
    """ Rotation matrix about x-axis"""
    c, s = np.cos( t ), np.sin( t )

    return np.array( [ [ 1, 0, 0 ], [ 0, c, -s ], [ 0, s, c ] ] )


# rotx

def roty( t: float ) -> np.ndarray:
    """ Rotation matrix about y-axis"""
    c, s = np.cos( t ), np.sin( t )

    return np.array( [ [ c, 0, s ], [ 0, 1, 0 ], [ -s, 0, c ] ] )


# roty

def rotz( t: float ) -> np.ndarray:
    """ Rotation matrix about z-axis"""
    c, s = np.cos( t ), np.sin( t )

    return np.array( [ [ c, -s, 0 ], [ s, c, 0 ], [ 0, 0, 1 ] ] )

# rotz
