class InvalidEffectSize(ValueError):
    """Raised when an effect size is reported under an unknown statistical test."""

    def __init__(self, test):
        self.test = test
        super().__init__(f"'{test}' is not a known statistical test.")
