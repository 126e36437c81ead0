# sub-packages
from continuum_robot_math import pytorch

# libraries
from continuum_robot_math import commonmath

from continuum_robot_math.commonmath import (
    pi,
    hat,
    inv_hat,
    matrix_log,
    rotation_error,
    linear_rotation_error,
)
