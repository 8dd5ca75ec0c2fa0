import io

import pytest

from algokit.chatbot import GREETING, PREFIX, Reply, main, respond


@pytest.mark.parametrize("message", ["hi", "Hello", "HI"])
def test_greetings(message):
    assert respond(message) == Reply("Hello! How can I assist you?")


def test_greeting_needs_exact_match():
    assert respond("hi there").text == (
        "I'm sorry, I didn't understand that. Can you please rephrase?"
    )


def test_return_keyword():
    assert respond("How do I RETURN this?").text == (
        "You can return a product within 7 days from the delivery date. "
        "Please visit our 'Returns' section."
    )


def test_return_takes_precedence_over_delivery():
    assert respond("return after delivery").text.startswith("You can return")


def test_delivery_keyword():
    assert respond("when is my delivery").text == (
        "Delivery usually takes 3 to 5 business days depending on your location."
    )


def test_ok_keyword():
    assert respond("Okay").text == "Great...!"


@pytest.mark.parametrize("message", ["contact", "need SUPPORT please"])
def test_contact_keywords(message):
    assert respond(message).text == "You can contact us at [email] or call [phone]."


@pytest.mark.parametrize("message", ["bye", "EXIT"])
def test_farewell(message):
    reply = respond(message)
    assert reply.farewell is True
    assert reply.text == "Thank you for chatting with us! Have a great day! 👋"


def test_non_farewell_replies_continue():
    assert respond("hello").farewell is False


def test_unknown_message():
    assert respond("what is the weather").text == (
        "I'm sorry, I didn't understand that. Can you please rephrase?"
    )


def test_main_stops_at_bye(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hi\nbye\nhello\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(PREFIX + GREETING)
    assert out.count("You: ") == 2
    assert PREFIX + respond("bye").text in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("delivery\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert PREFIX + respond("delivery").text in out
    assert out.count("You: ") == 2