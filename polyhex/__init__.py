"""Free polyhex enumeration with symmetry classification."""
