from main import parse_args


def test_defaults():
    args, rest = parse_args([])
    assert args.log_level == "WARNING"
    assert args.style == "Fusion"
    assert rest == []


def test_overrides_and_qt_passthrough():
    args, rest = parse_args(["--log-level", "DEBUG", "--style", "Windows", "-reverse"])
    assert args.log_level == "DEBUG"
    assert args.style == "Windows"
    assert rest == ["-reverse"]
