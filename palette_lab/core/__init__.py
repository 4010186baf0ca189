"""palette_lab.core — Foundation layer.

Contains the colour pipeline (mixing, gradations, feasibility, colour info),
type definitions, config loading, and report builder.
This module has NO dependencies on palette_lab.generators or palette_lab.registry.
Only stdlib, numpy, and coloraide are allowed here.
"""
