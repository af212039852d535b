"""Domain values and validation rules (CPF, phone types)."""
