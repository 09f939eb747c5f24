"""
Transforms sub-package for sheetframes.

Contains the normalization steps that reshape detected frames into one
uniform record set. Each step takes a list of frames and returns a new
list; inputs are never modified.

Design: Pipeline Pattern
- pipeline.py orchestrates the sequence of steps.
- Individual steps live in separate modules for testability:
  - splitter.py: Melt multi-value frames into (key, value) frames.
  - header.py: Turn each frame's first label into a ``Title`` field.
  - union.py: Re-key every record onto the sorted union of field names.
"""
