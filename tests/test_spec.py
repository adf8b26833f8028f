from getoptish.spec import Arity, LongOption, LongSpec, ShortSpec

# --- Short spec ------------------------------------------------------------- #


def test_short_spec_arities():
    spec = ShortSpec.compile("xc:o::")
    assert spec.lookup("x") == Arity.NONE
    assert spec.lookup("c") == Arity.REQUIRED
    assert spec.lookup("o") == Arity.OPTIONAL
    assert spec.lookup("z") is None


def test_short_spec_empty():
    assert ShortSpec.compile("").arities == {}


def test_short_spec_colon_never_declared():
    spec = ShortSpec.compile(":a:")
    assert spec.lookup(":") is None
    assert spec.lookup("a") == Arity.REQUIRED


def test_short_spec_extra_colons():
    assert ShortSpec.compile("a:::").lookup("a") == Arity.OPTIONAL


def test_short_spec_first_declaration_wins():
    assert ShortSpec.compile("aa:").lookup("a") == Arity.NONE


# --- Long spec -------------------------------------------------------------- #


def test_long_option_arities():
    assert LongOption.compile("exec") == LongOption("exec", "exec", Arity.NONE)
    assert LongOption.compile("conf=") == LongOption("conf=", "conf", Arity.REQUIRED)
    assert LongOption.compile("optn==") == LongOption("optn==", "optn", Arity.OPTIONAL)


def test_long_option_label():
    assert LongOption.compile("optn==").label == "--optn"


def test_long_spec_sorted_by_name():
    spec = LongSpec.compile(["columns", "conf=", "colors", "ab-c", "ab="])
    assert [o.name for o in spec.options] == ["ab", "ab-c", "colors", "columns", "conf"]
    assert len(spec) == 5


def test_long_spec_starting_with():
    spec = LongSpec.compile(["columns", "conf=", "colors"])
    assert [o.label for o in spec.startingWith("col")] == ["--colors", "--columns"]
    assert spec.startingWith("x") == []
