"""palette-lab: perceptually graded tints and shades from a small palette config."""

__version__ = '0.1.0'
