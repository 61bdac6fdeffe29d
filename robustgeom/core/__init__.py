"""Implementation modules behind the flat ``robustgeom`` facade."""
