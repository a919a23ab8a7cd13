"""Parameter objects that customize the assumptions of the WBGT models."""
