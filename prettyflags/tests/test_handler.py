"""Tests for flag registration and parsing through FlagHandler."""

import pytest

from prettyflags import FlagHandler, FlagValue, new_flag_handler
from prettyflags.config.metadata import NOT_AVAILABLE
from prettyflags.errors import ConfigurationError, ValidationError


class TestConstruction:
    """Test suite for handler construction."""

    def test_missing_metadata_defaults_to_sentinel(self):
        flags = FlagHandler("tool")

        assert flags.metadata.app == "tool"
        assert flags.metadata.version == NOT_AVAILABLE
        assert flags.metadata.branch == NOT_AVAILABLE
        assert flags.metadata.commit == NOT_AVAILABLE
        assert flags.metadata.tag == NOT_AVAILABLE

    def test_factory_matches_constructor(self):
        flags = new_flag_handler("tool", "1.0", None, "abc", color=False)

        assert isinstance(flags, FlagHandler)
        assert flags.metadata.version == "1.0"
        assert flags.metadata.branch == NOT_AVAILABLE
        assert flags.metadata.commit == "abc"
        assert flags.renderer.color is False

    def test_handlers_are_independent(self):
        first = FlagHandler("one", color=False)
        second = FlagHandler("two", color=False)
        first.add_flag_bool("verbose", "General", False, "verbose")

        # Same name registers cleanly on another handler
        handle = second.add_flag_bool("verbose", "General", False, "verbose")
        first.parse(["--verbose"])

        assert handle.value is False
        assert len(second.registry) == 1


class TestRegistration:
    """Test suite for the add_flag_* family."""

    def test_handle_holds_default_before_parse(self, flags):
        port = flags.add_flag_uint("port", "Server", 8080, "listen port")

        assert isinstance(port, FlagValue)
        assert port.value == 8080
        assert port.name == "port"
        assert port.kind == "uint"

    def test_every_kind_registers(self, flags):
        handles = [
            flags.add_flag_bool("b", "All", True, ""),
            flags.add_flag_string("s", "All", "x", ""),
            flags.add_flag_int("i", "All", -1, ""),
            flags.add_flag_int64("i64", "All", 2 ** 40, ""),
            flags.add_flag_uint("u", "All", 1, ""),
            flags.add_flag_uint64("u64", "All", 2 ** 63, ""),
            flags.add_flag_float64("f", "All", 0.25, ""),
        ]

        assert [h.kind for h in handles] == ["bool", "string", "int", "int64", "uint", "uint64", "float64"]
        assert [f.name for f in flags.registry.flags("All")] == ["b", "s", "i", "i64", "u", "u64", "f"]

    def test_flag_under_two_sections(self, flags, output, row):
        flags.add_flag_string("out", ["A", "B"], "out.txt", "output file", ["o"])

        flags.usage(output)()
        text = output.getvalue()

        assert text.index("A Options:") < text.index("B Options:")
        assert text.count(row("--out", "-o", "out.txt", "output file")) == 2

    def test_invalid_section_aborts_registration(self, flags, quiet_errors):
        with pytest.raises(ConfigurationError):
            flags.add_flag_bool("verbose", 42, False, "verbose")

        assert len(flags.registry) == 0
        # Nothing was bound, so the name is still free
        flags.add_flag_bool("verbose", "General", False, "verbose")
        assert flags.parse(["--verbose"]).verbose is True

    def test_invalid_default_raises(self, flags, quiet_errors):
        with pytest.raises(ValidationError):
            flags.add_flag_uint("workers", "General", -1, "worker count")

        assert "General" not in flags.registry

    def test_float_default_widened(self, flags):
        ratio = flags.add_flag_float64("ratio", "General", 2, "ratio")

        assert ratio.value == 2.0
        assert flags.registry.flags("General")[0].value == 2.0

    def test_float_default_renders_without_trailing_zero(self, flags, output, row):
        flags.add_flag_float64("ratio", "General", 2.0, "ratio")

        flags.usage(output)()

        assert row("--ratio", "", "2", "ratio") in output.getvalue()

    def test_alt_name_collision_is_configuration_error(self, flags, quiet_errors):
        flags.add_flag_bool("verbose", "General", False, "verbose", ["v"])

        with pytest.raises(ConfigurationError) as exc_info:
            flags.add_flag_string("version", "General", "", "version", ["v"])

        assert "version" in exc_info.value.problem
        assert "-v" in exc_info.value.cause
        assert [f.name for f in flags.registry.flags("General")] == ["verbose"]

    def test_duplicate_primary_name_is_configuration_error(self, flags, quiet_errors):
        flags.add_flag_int("count", "General", 0, "count")

        with pytest.raises(ConfigurationError):
            flags.add_flag_int("count", "Other", 0, "count")

        assert "Other" not in flags.registry

    def test_alt_name_colliding_with_help(self, flags, quiet_errors):
        with pytest.raises(ConfigurationError):
            flags.add_flag_bool("hidden", "General", False, "hidden", ["h"])

    def test_percent_in_usage_is_allowed(self, flags, output):
        flags.add_flag_float64("ratio", "General", 0.5, "share in %")
        flags.usage(output)()

        assert "share in %" in output.getvalue()


class TestParse:
    """Test suite for parsing into handles."""

    def test_no_args_keeps_defaults(self, flags):
        verbose = flags.add_flag_bool("verbose", "General", False, "verbose")
        name = flags.add_flag_string("name", "General", "anon", "name")

        flags.parse([])

        assert verbose.value is False
        assert name.value == "anon"

    def test_bool_flag_forms(self, flags):
        verbose = flags.add_flag_bool("verbose", "General", False, "verbose")

        flags.parse(["--verbose"])
        assert verbose.value is True

        flags.parse(["--verbose=false"])
        assert verbose.value is False

        flags.parse(["--verbose", "t"])
        assert verbose.value is True

    def test_true_default_can_be_switched_off(self, flags):
        color = flags.add_flag_bool("color", "Output", True, "colorize")

        flags.parse(["--color=0"])

        assert color.value is False
        assert not color

    @pytest.mark.parametrize("argv", [["--verbose"], ["--v"], ["-v"]])
    def test_alt_names_share_the_value(self, argv, output):
        flags = FlagHandler("myapp", output=output, color=False)
        verbose = flags.add_flag_bool("verbose", "General", False, "verbose", ["v"])

        flags.parse(argv)

        assert verbose.value is True

    @pytest.mark.parametrize(
        "argv",
        [["--output", "x.txt"], ["--output=x.txt"], ["-o", "x.txt"], ["--o=x.txt"], ["--out", "x.txt"]],
    )
    def test_every_alt_name_sets_string(self, argv, output):
        flags = FlagHandler("myapp", output=output, color=False)
        out = flags.add_flag_string("output", "General", "", "output file", ["o", "out"])

        flags.parse(argv)

        assert out.value == "x.txt"
        assert str(out) == "x.txt"

    def test_typed_values(self, flags):
        count = flags.add_flag_int("count", "N", 0, "")
        offset = flags.add_flag_int64("offset", "N", 0, "")
        workers = flags.add_flag_uint("workers", "N", 1, "")
        size = flags.add_flag_uint64("size", "N", 0, "")
        ratio = flags.add_flag_float64("ratio", "N", 0.0, "")

        flags.parse([
            "--count=-7",
            "--offset", str(2 ** 40),
            "--workers=0x10",
            "--size", str(2 ** 64 - 1),
            "--ratio=1e-3",
        ])

        assert count.value == -7
        assert offset.value == 2 ** 40
        assert workers.value == 16
        assert size.value == 2 ** 64 - 1
        assert ratio.value == 0.001

    def test_leading_zero_integers_are_octal(self, flags):
        mode = flags.add_flag_uint("mode", "Files", 0, "permission bits")
        count = flags.add_flag_int("count", "Files", 0, "count")

        flags.parse(["--mode", "0644", "--count=05"])

        assert mode.value == 420
        assert count.value == 5

    def test_dash_prefixed_string_needs_equals_form(self, flags):
        pattern = flags.add_flag_string("pattern", "Search", "", "pattern", ["p"])

        flags.parse(["--pattern=-x"])
        assert pattern.value == "-x"

        flags.parse(["-p=-x"])
        assert pattern.value == "-x"

        with pytest.raises(SystemExit) as exc_info:
            flags.parse(["--pattern", "-x"])
        assert exc_info.value.code == 2

    def test_returns_namespace(self, flags):
        flags.add_flag_int("count", "N", 3, "")

        namespace = flags.parse(["--count", "5"])

        assert namespace.count == 5

    def test_defaults_to_sys_argv(self, flags, monkeypatch):
        verbose = flags.add_flag_bool("verbose", "General", False, "verbose")
        monkeypatch.setattr("sys.argv", ["myapp", "--verbose"])

        flags.parse()

        assert verbose.value is True


class TestParseExits:
    """Test suite for help and error exits during parsing."""

    def test_help_prints_usage_and_exits_zero(self, flags, output):
        flags.add_flag_bool("verbose", "General", False, "enable verbose logging")

        with pytest.raises(SystemExit) as exc_info:
            flags.parse(["--help"])

        assert exc_info.value.code == 0
        assert "General Options:" in output.getvalue()

    def test_unknown_flag_exits_two_with_usage(self, flags, output, capsys):
        flags.add_flag_bool("verbose", "General", False, "verbose")

        with pytest.raises(SystemExit) as exc_info:
            flags.parse(["--nope"])

        assert exc_info.value.code == 2
        assert "unrecognized arguments: --nope" in capsys.readouterr().err
        assert "[+] myapp" in output.getvalue()

    def test_malformed_value_exits_two(self, flags, capsys):
        flags.add_flag_uint("port", "Server", 8080, "listen port", ["p"])

        with pytest.raises(SystemExit) as exc_info:
            flags.parse(["--port", "http"])

        assert exc_info.value.code == 2
        assert "invalid uint value 'http'" in capsys.readouterr().err

    def test_out_of_range_value_exits_two(self, flags, capsys):
        flags.add_flag_int("count", "N", 0, "")

        with pytest.raises(SystemExit):
            flags.parse([f"--count={2 ** 31}"])

        assert "out of range" in capsys.readouterr().err

    def test_positional_argument_is_an_error(self, flags):
        flags.add_flag_string("name", "General", "", "name")

        with pytest.raises(SystemExit) as exc_info:
            flags.parse(["stray"])

        assert exc_info.value.code == 2


class TestUsageScreen:
    """Test suite for the usage screen produced by a handler."""

    def test_verbose_flag_scenario(self, flags, output, row):
        flags.add_flag_bool("verbose", "General", False, "enable verbose logging")

        flags.usage(output)()
        lines = output.getvalue().split("\n")

        header = lines.index("    General Options:")
        assert lines[header + 1] == row("Parameter", "Short", "Default", "Description")
        assert lines[header + 2] == row("--verbose", "", "false", "enable verbose logging")
        assert output.getvalue().endswith("enable verbose logging\n\n")

    def test_empty_string_default_is_quoted(self, flags, output, row):
        flags.add_flag_string("name", "General", "", "your name")

        flags.usage(output)()

        assert row("--name", "", '""', "your name") in output.getvalue()

    def test_section_order_follows_first_registration(self, flags, output):
        flags.add_flag_bool("a", "Zeta", False, "")
        flags.add_flag_bool("b", ["Alpha", "Zeta"], False, "")
        flags.add_flag_bool("c", "Alpha", False, "")

        flags.usage(output)()
        text = output.getvalue()

        assert text.index("Zeta Options:") < text.index("Alpha Options:")
        assert text.count("Zeta Options:") == 1
        assert flags.registry.sections == ("Zeta", "Alpha")

    def test_delegating_print_helpers(self, flags, output, row):
        flags.print_app_header(output)
        flags.print_usage_section_header(output, "Extra")
        flags.print_usage_line(output, "--x", "-y", "", "z")

        text = output.getvalue()
        assert text.startswith("[+] myapp\n")
        assert "    Extra Options:\n" in text
        assert text.endswith(row("--x", "-y", '""', "z") + "\n")
