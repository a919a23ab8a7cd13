"""Functions for running whole fields of conditions through the WBGT models."""
