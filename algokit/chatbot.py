"""A keyword-driven customer support chatbot."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

PREFIX = "🤖 Chatbot: "
GREETING = (
    "Hello! Welcome to ShopEasy Customer Support. How can I help you today?"
)


@dataclass(frozen=True)
class Reply:
    """A chatbot answer; farewell marks the end of the conversation."""

    text: str
    farewell: bool = False


_HELLO = Reply("Hello! How can I assist you?")
_RETURNS = Reply(
    "You can return a product within 7 days from the delivery date. "
    "Please visit our 'Returns' section."
)
_DELIVERY = Reply(
    "Delivery usually takes 3 to 5 business days depending on your location."
)
_OK = Reply("Great...!")
_CONTACT = Reply("You can contact us at [email] or call [phone].")
_BYE = Reply(
    "Thank you for chatting with us! Have a great day! 👋", farewell=True
)
_UNKNOWN = Reply("I'm sorry, I didn't understand that. Can you please rephrase?")


def respond(message: str) -> Reply:
    """Choose the reply to one line typed by the user."""
    text = message.lower()
    if text in ("hi", "hello"):
        return _HELLO
    if "return" in text:
        return _RETURNS
    if "delivery" in text:
        return _DELIVERY
    if "ok" in text:
        return _OK
    if "contact" in text or "support" in text:
        return _CONTACT
    if text in ("bye", "exit"):
        return _BYE
    return _UNKNOWN


def main(argv: Sequence[str] | None = None) -> int:
    """Run the conversation on standard input until farewell or end of input."""
    argparse.ArgumentParser(description="Customer support chatbot.").parse_args(argv)
    print(PREFIX + GREETING)
    while True:
        try:
            line = input("You: ")
        except EOFError:
            break
        reply = respond(line)
        print(PREFIX + reply.text)
        if reply.farewell:
            break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())