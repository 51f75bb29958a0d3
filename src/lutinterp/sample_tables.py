"""Reference pH buffer table used by the example program.

Rows are temperatures in degrees Celsius, columns are standard buffers. The
x reference values are the buffer pH values at 25 degrees Celsius.
"""

from __future__ import annotations

import numpy as np

from .lookup_table import InterpolableLUT

NUM_TEMP_POINTS = 12
NUM_PH_POINTS = 7

TEMPERATURE_POINTS = (0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0, 40.0, 45.0, 50.0, 55.0)
PH_VALUES_AT_25C = (1.68, 4.01, 6.86, 7.00, 9.18, 10.01, 12.46)

# pH of each buffer at each temperature point
PH_BUFFER_VALUES = (
    (1.67, 4.01, 6.98, 7.12, 9.46, 10.32, 13.47),  # 0 C
    (1.67, 4.01, 6.95, 7.09, 9.39, 10.25, 13.25),  # 5 C
    (1.67, 4.00, 6.92, 7.06, 9.32, 10.18, 13.03),  # 10 C
    (1.67, 4.00, 6.90, 7.04, 9.27, 10.12, 12.83),  # 15 C
    (1.68, 4.00, 6.88, 7.02, 9.22, 10.06, 12.64),  # 20 C
    (1.68, 4.01, 6.86, 7.00, 9.18, 10.01, 12.46),  # 25 C
    (1.69, 4.01, 6.85, 6.98, 9.14, 9.97, 12.29),  # 30 C
    (1.69, 4.02, 6.84, 6.98, 9.10, 9.93, 12.14),  # 35 C
    (1.70, 4.03, 6.84, 6.97, 9.07, 9.89, 11.99),  # 40 C
    (1.70, 4.04, 6.83, 6.97, 9.04, 9.86, 11.86),  # 45 C
    (1.71, 4.06, 6.83, 6.97, 9.01, 9.83, 11.73),  # 50 C
    (1.72, 4.08, 6.83, 6.97, 8.99, 9.81, 11.61),  # 55 C
)

# (pH, temperature) pairs printed by the example program
EXAMPLE_QUERIES = (
    (7.01, 37.0),
    (7.50, 37.0),
    (8.00, 37.0),
    (8.50, 37.0),
    (9.00, 37.0),
    (10.01, 0.01),
)


def ph_buffer_table() -> InterpolableLUT:
    """Temperature-compensation table mapping measured pH to pH at 25 C."""
    return InterpolableLUT.create(
        np.array(PH_BUFFER_VALUES, dtype=float),
        PH_VALUES_AT_25C,
        TEMPERATURE_POINTS,
        NUM_PH_POINTS,
        NUM_TEMP_POINTS,
    )
