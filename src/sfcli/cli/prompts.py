"""Prompt implementations backing the ``Prompter`` contract."""

from __future__ import annotations


class QuestionaryPrompter:
    """Interactive prompts rendered with questionary.

    A ``None`` answer means the user interrupted the prompt and is raised as
    ``KeyboardInterrupt``.
    """

    def text(self, message: str, default: str = "") -> str:
        import questionary

        answer = questionary.text(message, default=default).ask()
        if answer is None:
            raise KeyboardInterrupt
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        import questionary

        answer = questionary.confirm(message, default=default).ask()
        if answer is None:
            raise KeyboardInterrupt
        return bool(answer)


class DefaultsPrompter:
    """Non-interactive prompter that accepts every pre-filled default."""

    def text(self, message: str, default: str = "") -> str:
        del message
        return default

    def confirm(self, message: str, default: bool = False) -> bool:
        del message
        return default
