"""
The SOLVERS layer turns tier configuration into section geometry:
riser heights, aisle steps and row-by-row profile points.
"""
