"""
lenscalc.optics
---------------
Thin-lens projections from the sensor to the test chart: half FOV angle
and chart-plane widths at a given test distance.
"""
