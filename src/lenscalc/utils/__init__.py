"""
lenscalc.utils
--------------
Presentation helpers: input parsing, number formatting, the text chart
sheet and the factor sweep plot.
"""
