import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from prompt_toolkit.validation import ValidationError

from sshc.adapters.cli.prompts import (
    ConnectionCompleter,
    ConnectionValidator,
    InteractivePromptProvider,
)
from sshc.domain.connections import ConnectionRecord, format_choices

STORE = {
    "home": ConnectionRecord("bob", "10.0.0.5"),
    "work": ConnectionRecord("alice", "10.1.0.1"),
}


def source(text):
    return format_choices(STORE, text)


def complete(completer, text):
    return list(completer.get_completions(Document(text), CompleteEvent(text_inserted=True)))


def select_with_keys(keys):
    with create_pipe_input() as pipe:
        pipe.send_text(keys)
        provider = InteractivePromptProvider(input=pipe, output=DummyOutput())
        return provider.select("Choose:", source)


def test_completer_offers_every_label_for_empty_text():
    completions = complete(ConnectionCompleter(source), "")

    assert [c.text for c in completions] == ["home", "work"]
    assert [c.display_text for c in completions] == [
        "home  (bob@10.0.0.5)",
        "work  (alice@10.1.0.1)",
    ]


def test_completer_filters_on_labels_not_targets():
    completer = ConnectionCompleter(source)

    assert [c.text for c in complete(completer, "WO")] == ["work"]
    assert complete(completer, "10.1") == []
    assert complete(completer, "alice") == []


def test_completer_repads_for_each_keystroke():
    store = {
        "db": ConnectionRecord("root", "db"),
        "webserver": ConnectionRecord("www", "web"),
    }
    completer = ConnectionCompleter(lambda text: format_choices(store, text))

    assert complete(completer, "")[0].display_text == "db        (root@db)"
    assert complete(completer, "d")[0].display_text == "db    (root@db)"


def test_completion_replaces_the_typed_text():
    completion = complete(ConnectionCompleter(source), "wo")[0]

    assert completion.start_position == -2


def test_validator_rejects_text_matching_only_a_hostname():
    with pytest.raises(ValidationError):
        ConnectionValidator(source).validate(Document("10.1"))


def test_validator_accepts_partial_label():
    ConnectionValidator(source).validate(Document("wo"))


def test_select_returns_first_match_for_partial_label():
    assert select_with_keys("wo\r") == "work"


def test_select_returns_exact_label():
    assert select_with_keys("home\r") == "home"


def test_select_stays_open_after_rejected_text():
    assert select_with_keys("10.1\r" + "\x7f" * 4 + "home\r") == "home"


def test_select_end_of_input_raises_eof():
    with pytest.raises(EOFError):
        select_with_keys("\x04")
