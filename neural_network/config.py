# config.py
# defaults shared by the random builders

import numpy as np

DTYPE = np.float32  # every weight, bias and activation is single precision

# weights and biases are drawn from [WEIGHT_LOW, WEIGHT_HIGH)
WEIGHT_LOW = -1.0
WEIGHT_HIGH = 1.0
