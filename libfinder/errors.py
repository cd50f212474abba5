class LibFinderError(Exception):
    """Base class for errors raised by libfinder."""


class RequiredPackageNotFound(LibFinderError):
    """A package marked required failed detection.

    Carries the failed ResolutionOutcome so the host can report the
    composed diagnostic before aborting the configuration run.
    """

    def __init__(self, outcome):
        super().__init__(outcome.message)
        self.outcome = outcome

    @property
    def prefix(self):
        return self.outcome.prefix
