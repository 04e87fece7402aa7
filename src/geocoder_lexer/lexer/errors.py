class RuleConfigurationError(ValueError):
    """A ruleset could not be built: bad pattern, bad join rule or unknown name."""
