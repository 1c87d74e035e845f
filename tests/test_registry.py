import pytest

from chromatic.lexer import Config, RegexLexer, Rule
from chromatic.registry import LexerRegistry
from chromatic.types import TokenType


def make_lexer(name, aliases=(), filenames=(), alias_filenames=(), mime_types=(), priority=0.0):
    config = Config(
        name=name,
        aliases=list(aliases),
        filenames=list(filenames),
        alias_filenames=list(alias_filenames),
        mime_types=list(mime_types),
        priority=priority,
    )
    return RegexLexer(config, lambda: {"root": [Rule(".", TokenType.TEXT)]})


@pytest.fixture
def registry():
    reg = LexerRegistry()
    reg.register(make_lexer("VimL", aliases=["vim"], filenames=["*.vim", ".vimrc"],
                            mime_types=["text/x-vim"]))
    reg.register(make_lexer("Python", aliases=["py"], filenames=["*.py"],
                            alias_filenames=["*.pyw"], mime_types=["text/x-python"]))
    return reg


def test_get_by_name_alias_and_case(registry):
    vim = registry.lexers[0]
    assert registry.get("VimL") is vim
    assert registry.get("viml") is vim
    assert registry.get("vim") is vim
    assert registry.get("VIM") is vim


def test_get_by_extension_and_filename(registry):
    assert registry.get("py") is registry.lexers[1]
    assert registry.get("vim") is registry.lexers[0]
    assert registry.get(".vimrc") is registry.lexers[0]
    assert registry.get("nothing-here") is None


def test_names(registry):
    assert registry.names(False) == ["Python", "VimL"]
    assert registry.names(True) == sorted(["VimL", "vim", "Python", "py"])


def test_match_ignores_directories_and_backup_suffixes(registry):
    python = registry.lexers[1]
    assert registry.match("/some/dir/script.py") is python
    assert registry.match("script.py.bak") is python
    assert registry.match("script.py~") is python
    assert registry.match("script.txt") is None


def test_match_falls_back_to_alias_filenames(registry):
    assert registry.match("gui.pyw") is registry.lexers[1]


def test_match_prefers_priority():
    reg = LexerRegistry()
    low = reg.register(make_lexer("Low", filenames=["*.x"]))
    high = reg.register(make_lexer("High", filenames=["*.x"], priority=1.0))
    assert reg.match("a.x") is high
    assert reg.match("a.x") is not low


def test_match_mime_type(registry):
    assert registry.match_mime_type("text/x-python") is registry.lexers[1]
    assert registry.match_mime_type("text/x-vim") is registry.lexers[0]
    assert registry.match_mime_type("application/unknown") is None


def test_analyse_picks_highest_weight(registry):
    registry.lexers[0].set_analyser(lambda text: 0.9 if "let " in text else 0.0)
    registry.lexers[1].set_analyser(lambda text: 0.5 if "def " in text else 0.0)
    assert registry.analyse("let x = 1") is registry.lexers[0]
    assert registry.analyse("def f(): pass") is registry.lexers[1]
    assert registry.analyse("nothing") is None


def test_register_sets_registry_and_returns_lexer():
    reg = LexerRegistry()
    lexer = make_lexer("Thing")
    assert reg.register(lexer) is lexer
    assert lexer.tokenise(None, "a").registry is reg