"""Project type and language questions."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from nezu.create.menu import ask


class ProjectType(Enum):
    LIBRARY = "lib"
    REACT_SPA = "reactSPA"

    @property
    def label(self):
        return _TYPE_LABELS[self]


class Language(Enum):
    TYPESCRIPT = "ts"
    JAVASCRIPT = "js"

    @property
    def label(self):
        return _LANGUAGE_LABELS[self]


_TYPE_LABELS = {
    ProjectType.LIBRARY: "Library",
    ProjectType.REACT_SPA: "React SPA",
}

_LANGUAGE_LABELS = {
    Language.TYPESCRIPT: "TypeScript",
    Language.JAVASCRIPT: "JavaScript",
}

TYPE_QUESTION = "Please select the type of your project:"
LANGUAGE_QUESTION = "Which language do you want to use:"


@dataclass(frozen=True)
class ArchetypeSelection:
    type: ProjectType
    language: Language

    def describe(self):
        return f"{self.type.label} ({self.language.label})"


class SelectionPrompter:
    """Asks for project type, then language, through an ask function.

    ask_fn has the signature ask(message, choices) -> value | None, where
    choices is a list of (label, value) pairs.
    """

    def __init__(self, ask_fn: Callable = ask):
        self._ask = ask_fn

    def prompt(self) -> Optional[ArchetypeSelection]:
        """Return the user's selection, or None if either question was cancelled."""
        project_type = self._ask(
            TYPE_QUESTION, [(t.label, t) for t in ProjectType],
        )
        if project_type is None:
            return None

        language = self._ask(
            LANGUAGE_QUESTION, [(lang.label, lang) for lang in Language],
        )
        if language is None:
            return None

        return ArchetypeSelection(type=project_type, language=language)
