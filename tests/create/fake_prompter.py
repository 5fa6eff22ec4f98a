"""FakePrompter: test double for SelectionPrompter."""


class FakePrompter:
    """Returns a fixed selection (or None for a cancelled prompt)."""

    def __init__(self, selection=None):
        self.selection = selection
        self.calls = 0

    def prompt(self):
        self.calls += 1
        return self.selection
