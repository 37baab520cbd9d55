"""
Tests for language renderers and the renderer registry.
"""

import pytest

from featuregen.codegen import LanguageRenderer, RegistryError, RendererRegistry
from featuregen.codegen.core.renderer import split_lines
from featuregen.codegen.languages import (
    builtin_renderers,
    create_csharp_renderer,
    create_python_renderer,
    create_vb_renderer,
)
from featuregen.codegen import registry as registry_module
from featuregen.codegen.registry import (
    create_default_registry,
    extension_for,
    get_renderer,
    is_language_supported,
    list_all_language_info,
    register_renderer,
)


# ═══════════════════════════════════════════════════════════════════
#  split_lines
# ═══════════════════════════════════════════════════════════════════


class TestSplitLines:
    def test_all_line_breaks(self):
        assert split_lines("a\r\nb\rc\nd\u2028e\u2029f\u0085g") == list("abcdefg")

    def test_blank_lines_dropped(self):
        assert split_lines("\n\n  \nx\n\t\n") == ["x"]

    def test_empty(self):
        assert split_lines("") == []


# ═══════════════════════════════════════════════════════════════════
#  C#
# ═══════════════════════════════════════════════════════════════════


class TestCSharpRenderer:
    def test_single_line(self):
        renderer = create_csharp_renderer()
        assert renderer.render_error_lines("Step is ambiguous") == "#error Step is ambiguous"

    def test_multi_line(self):
        renderer = create_csharp_renderer()
        assert renderer.render_error_lines("first\r\nsecond") == "#error first\n#error second"

    def test_line_ending(self):
        renderer = create_csharp_renderer()
        assert renderer.render_error_lines("a\nb", "\r\n") == "#error a\r\n#error b"

    def test_control_characters_removed(self):
        renderer = create_csharp_renderer()
        assert renderer.render_error_lines("bell\x07 and\x00 nul") == "#error bell and nul"

    def test_empty_message(self):
        renderer = create_csharp_renderer()
        assert renderer.render_error_lines("") == "#error"

    def test_extension(self):
        assert create_csharp_renderer().file_extension == ".cs"


# ═══════════════════════════════════════════════════════════════════
#  Visual Basic
# ═══════════════════════════════════════════════════════════════════


class TestVBRenderer:
    def test_render(self):
        renderer = create_vb_renderer()
        assert renderer.render_error_lines("one\ntwo") == "#Error one\n#Error two"

    def test_extension(self):
        assert create_vb_renderer().file_extension == ".vb"


# ═══════════════════════════════════════════════════════════════════
#  Python
# ═══════════════════════════════════════════════════════════════════


class TestPythonRenderer:
    def test_render(self):
        renderer = create_python_renderer()
        assert renderer.render_error_lines("bad step") == "raise RuntimeError('bad step')"

    @pytest.mark.parametrize(
        "message",
        [
            "it's \"quoted\"",
            "back\\slash at end \\",
            "''' triple",
            "tab\tand\x00nul",
            "üñíçødé ✓",
            "\x0c form feed",
        ],
    )
    def test_output_compiles(self, message):
        source = create_python_renderer().render_error_lines(message)
        compile(source, "generated.py", "exec")

    def test_message_survives_escaping(self):
        source = create_python_renderer().render_error_lines("it's \"quoted\" \\")
        with pytest.raises(RuntimeError, match="quoted"):
            exec(compile(source, "generated.py", "exec"), {})

    def test_extension(self):
        assert create_python_renderer().file_extension == ".py"


# ═══════════════════════════════════════════════════════════════════
#  Registry
# ═══════════════════════════════════════════════════════════════════


def _fsharp():
    return LanguageRenderer(
        name="fsharp",
        file_extension=".fs",
        error_statement=lambda text: f"// error: {text}",
        aliases=("f#",),
    )


class TestRendererRegistry:
    def test_builtin_languages(self):
        registry = create_default_registry()
        assert registry.list_languages() == ["csharp", "python", "vb"]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("csharp", "csharp"),
            ("CSharp", "csharp"),
            ("C#", "csharp"),
            ("cs", "csharp"),
            ("VB.NET", "vb"),
            ("visualbasic", "vb"),
            ("py", "python"),
        ],
    )
    def test_names_and_aliases(self, name, expected):
        registry = create_default_registry()
        assert registry.get_renderer(name).name == expected
        assert registry.is_supported(name)

    def test_unknown_language(self):
        registry = create_default_registry()
        with pytest.raises(RegistryError, match="cobol"):
            registry.get_renderer("cobol")
        assert not registry.is_supported("cobol")

    def test_register_new_language(self):
        registry = create_default_registry()
        registry.register(_fsharp(), aliases=["fsharp-lang"])

        assert registry.extension_for("F#") == ".fs"
        assert registry.render_error_lines("x\ny", "fsharp") == "// error: x\n// error: y"
        assert registry.get_aliases_for_language("fsharp") == ["f#", "fsharp-lang"]

    def test_existing_registration_kept_without_replace(self):
        registry = RendererRegistry([_fsharp()])
        other = LanguageRenderer("fsharp", ".fsx", lambda text: text)

        registry.register(other)

        assert registry.extension_for("fsharp") == ".fs"

    def test_replace_registration(self):
        registry = RendererRegistry([_fsharp()])
        other = LanguageRenderer("fsharp", ".fsx", lambda text: text)

        registry.register(other, replace=True)

        assert registry.extension_for("fsharp") == ".fsx"

    def test_alias_conflicting_with_language(self):
        registry = create_default_registry()
        clash = LanguageRenderer("csharp-next", ".cs", lambda text: text, aliases=("vb",))

        with pytest.raises(RegistryError, match="conflicts"):
            registry.register(clash)
        assert not registry.is_supported("csharp-next")

    def test_alias_already_taken(self):
        registry = create_default_registry()
        clash = LanguageRenderer("csharp-next", ".cs", lambda text: text, aliases=("c#",))

        with pytest.raises(RegistryError, match="already points to 'csharp'"):
            registry.register(clash)

    def test_invalid_renderer(self):
        registry = RendererRegistry()
        with pytest.raises(RegistryError):
            registry.register(object())

    def test_unregister_removes_aliases(self):
        registry = create_default_registry()
        registry.unregister("C#")

        assert not registry.is_supported("csharp")
        assert not registry.is_supported("cs")
        assert registry.list_languages() == ["python", "vb"]

    def test_list_all_names(self):
        registry = create_default_registry()
        assert registry.list_all_names()["vb"] == ["vb", "vb.net", "vbnet", "visualbasic"]

    def test_language_info(self):
        info = create_default_registry().get_language_info("c#")
        assert info == {
            "name": "csharp",
            "display_name": "C#",
            "file_extension": ".cs",
            "aliases": ["c#", "cs"],
            "sample": "#error message",
        }

    def test_builtin_renderers_are_fresh(self):
        assert builtin_renderers() == builtin_renderers()
        assert builtin_renderers() is not builtin_renderers()


class TestGlobalRegistry:
    def test_module_helpers(self):
        assert extension_for("vb") == ".vb"
        assert get_renderer("py").name == "python"

    def test_language_support(self):
        assert is_language_supported("VB.NET")
        assert not is_language_supported("cobol")

    def test_all_language_info(self):
        info = list_all_language_info()
        assert list(info) == ["csharp", "python", "vb"]
        assert info["vb"]["sample"] == "#Error message"

    def test_register_in_global_registry(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_global_registry", create_default_registry())

        register_renderer(_fsharp(), aliases=["fsharp-lang"])
        register_renderer(LanguageRenderer("fsharp", ".fsx", lambda text: text), replace=True)

        assert extension_for("fsharp") == ".fsx"
        assert is_language_supported("f#")
        assert "fsharp" in list_all_language_info()
