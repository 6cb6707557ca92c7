"""Request validators run by the validation stage."""
