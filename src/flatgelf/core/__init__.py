"""Core domain: values, flattening, levels and the GELF record model."""
