from unittest.mock import patch

from tinycache._cli._utils._console import ConsoleLogger, LogLevel


def test_singleton():
    logger1 = ConsoleLogger.get_instance()
    logger2 = ConsoleLogger()
    assert logger1 is logger2, "ConsoleLogger should be a singleton"


@patch("click.echo")
def test_info_goes_to_stdout(mock_echo):
    ConsoleLogger.get_instance().info("hello")

    mock_echo.assert_called_once_with("hello", err=False)


@patch("click.echo")
def test_raw_keeps_text_untouched(mock_echo):
    ConsoleLogger.get_instance().raw("value\n")

    mock_echo.assert_called_once_with("value\n", nl=False)


@patch("click.secho")
def test_error_goes_to_stderr(mock_secho):
    ConsoleLogger.get_instance().error("Cache key is required.")

    mock_secho.assert_called_once_with(
        "Error: Cache key is required.", fg=LogLevel.ERROR.value, err=True
    )


@patch("click.secho")
def test_styled_levels(mock_secho):
    logger = ConsoleLogger.get_instance()
    logger.success("stored")
    logger.warning("careful")
    logger.hint("try --verbose")

    assert [call.kwargs["fg"] for call in mock_secho.call_args_list] == [
        "green",
        "yellow",
        "cyan",
    ]
    assert [call.kwargs["err"] for call in mock_secho.call_args_list] == [
        False,
        True,
        False,
    ]
