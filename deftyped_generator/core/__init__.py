"""Environment discovery and typing scaffold generation."""
