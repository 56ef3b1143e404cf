class ConfigurationError(ValueError):

	"""
	Raised when clip generation is asked to run with inputs it cannot honour.

	Covers malformed transition matrices, unknown pattern types, palettes that
	are too small, rhythm-repeat counts that do not divide the note count, and
	invalid clip settings. These are never retried.
	"""
