"""RichCardsBot - Bot Framework rich card sample

This package hosts a small conversational bot that asks the user to pick a rich
card and answers with the matching card attachments. The dialog engine, state
storage and card schema come from the Bot Framework SDK; this package only
wires them together and decides what to send on each turn.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
