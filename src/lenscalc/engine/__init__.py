"""
lenscalc.engine
---------------
Pure analysis engine (LensInputs → SpatialAnalysis) and factor sweeps.
"""
