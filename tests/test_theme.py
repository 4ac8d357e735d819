from supportdesk import theme


def test_set_theme():
    try:
        theme.set_theme(page_title="Support Desk Tests")
    except Exception as e:
        assert False, f"set_theme raised an exception: {e}"
