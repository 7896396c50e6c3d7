from rich.console import Console


def scripted_reader(*answers):
    """Returns a reader that replays `answers` and then behaves like a closed stdin."""
    remaining = iter(answers)
    prompts = []

    def reader(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    reader.prompts = prompts
    return reader


def console_text(console: Console) -> str:
    return console.file.getvalue()
