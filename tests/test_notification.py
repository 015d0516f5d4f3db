from satty.notification import log_result


def test_prints_message_and_notifies(capsys):
    received = []
    log_result("Copied to clipboard.", True, received.append)
    assert capsys.readouterr().out == "Copied to clipboard.\n"
    assert received == ["Copied to clipboard."]


def test_no_notification_when_disabled(capsys):
    received = []
    log_result("File saved to 'a.png'.", False, received.append)
    assert capsys.readouterr().out == "File saved to 'a.png'.\n"
    assert received == []


def test_each_call_notifies_once(capsys):
    received = []
    for text in ("first", "second"):
        log_result(text, True, received.append)
    assert received == ["first", "second"]
    assert capsys.readouterr().out.splitlines() == ["first", "second"]