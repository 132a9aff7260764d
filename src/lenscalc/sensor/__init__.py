"""
lenscalc.sensor
---------------
Sampling relations of a pixelated sensor:
    pixel pitch → Nyquist → 1/X Ny frequencies → cycle/line widths → TV lines.
"""
