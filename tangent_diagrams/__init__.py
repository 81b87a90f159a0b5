"""tangent_diagrams — Draw the tangent line visualization for y = x^2.

Opens an 800x800 matplotlib window showing a labelled grid, three
parametric curves, the tangent lines at (2, 4) and (-2, 4), and a legend.

Usage:
    python -m tangent_diagrams
    tangent-diagrams

Requires: pip install numpy matplotlib
"""
