"""Human, quiet, and JSON rendering of ServiceResult."""
