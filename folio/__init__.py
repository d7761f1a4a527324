"""
FOLIO - Formatted Output of Life-history In One document

A resume document model with a multi-target rendering engine. One structured
resume is projected into interchangeable on-screen layouts and into a
paginated, styled block sequence that stays fact-for-fact equivalent to the
preview.

Architecture:
- Document Context: Canonical resume schema, defaults, and the local document store
- Templating Context: Section formatters and the template variants (preview tree, HTML)
- Rendering Context: Style presets, document assembly, dispatch, and export writers
"""

__version__ = "0.1.0"
