"""Report export layer.

This package writes ranked customer tables and Pareto results
to local files for downstream reporting.
"""
