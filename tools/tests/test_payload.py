from __future__ import annotations

import unittest
from pathlib import Path, PurePosixPath

from rustdoc_tools.implementors import deref_mut
from rustdoc_tools.implementors.payload import (
    PayloadFormatError,
    iter_payload_files,
    parse_payload,
    payload_relpath,
    read_payload,
    render_payload,
    trait_path_from_file,
)
from rustdoc_tools.implementors.table import build_table

FIXTURE_DOC_DIR = Path(__file__).parent / "fixtures" / "doc"
DEREF_MUT_JS = FIXTURE_DOC_DIR / "implementors" / "core" / "ops" / "deref" / "trait.DerefMut.js"


class TestParsePayload(unittest.TestCase):
    def test_rustdoc_output_matches_generated_table(self) -> None:
        table = read_payload(DEREF_MUT_JS)

        self.assertEqual(list(table), ["bytes", "futures", "iovec", "mio"])
        self.assertEqual(dict(table), dict(deref_mut.build_table()))

    def test_fragments_are_decoded_not_rewritten(self) -> None:
        text = (
            '(function() {var implementors = {};\n'
            'implementors["bytes"] = ["impl&lt;T&gt; <a class=\\"trait\\" href=\\"x.html\\">X</a>",];\n'
            '})()\n'
        )

        table = parse_payload(text)

        self.assertEqual(
            table["bytes"],
            ('impl&lt;T&gt; <a class="trait" href="x.html">X</a>',),
        )

    def test_empty_group_and_duplicate_group(self) -> None:
        text = (
            '(function() {var implementors = {};\n'
            'implementors["bytes"] = ["a",];\n'
            'implementors["mio"] = [];\n'
            'implementors["bytes"] = ["b","c",];\n'
            '})()\n'
        )

        table = parse_payload(text)

        self.assertEqual(dict(table), {"bytes": ("b", "c"), "mio": ()})

    def test_missing_declaration(self) -> None:
        with self.assertRaises(PayloadFormatError):
            parse_payload('implementors["bytes"] = ["a",];\n')

    def test_malformed_assignment(self) -> None:
        text = (
            '(function() {var implementors = {};\n'
            'implementors["bytes"] = "not a list";\n'
            '})()\n'
        )
        with self.assertRaises(PayloadFormatError) as ctx:
            parse_payload(text)
        self.assertIn("Line 2", str(ctx.exception))

    def test_non_string_fragment(self) -> None:
        text = (
            '(function() {var implementors = {};\n'
            'implementors["bytes"] = [1,];\n'
            '})()\n'
        )
        with self.assertRaises(PayloadFormatError):
            parse_payload(text)


class TestRenderPayload(unittest.TestCase):
    def test_render_reproduces_rustdoc_file(self) -> None:
        rendered = render_payload(deref_mut.build_table())

        self.assertEqual(rendered, DEREF_MUT_JS.read_text(encoding="utf-8"))

    def test_unicode_line_separators_survive_render_and_parse(self) -> None:
        table = build_table([
            ("bytes", ["impl <a>X\u2028Y</a>", "impl <a>X\u2029Y</a>"]),
            ("mio", ["impl <a>X\x85Y</a>"]),
        ])

        parsed = parse_payload(render_payload(table))

        self.assertEqual(dict(parsed), dict(table))

    def test_crlf_payload(self) -> None:
        text = DEREF_MUT_JS.read_text(encoding="utf-8").replace("\n", "\r\n")

        self.assertEqual(dict(parse_payload(text)), dict(deref_mut.build_table()))

    def test_render_includes_handoff_trailer(self) -> None:
        rendered = render_payload(build_table([]))

        self.assertTrue(rendered.startswith("(function() {var implementors = {};\n"))
        self.assertIn("window.register_implementors(implementors);", rendered)
        self.assertIn("window.pending_implementors = implementors;", rendered)
        self.assertEqual(dict(parse_payload(rendered)), {})


class TestTraitPaths(unittest.TestCase):
    def test_trait_path_from_file(self) -> None:
        self.assertEqual(trait_path_from_file(DEREF_MUT_JS, FIXTURE_DOC_DIR), "core::ops::deref::DerefMut")
        self.assertEqual(
            trait_path_from_file(PurePosixPath("/doc/implementors/futures/future/trait.Future.js")),
            "futures::future::Future",
        )

    def test_module_named_implementors_is_kept(self) -> None:
        self.assertEqual(
            trait_path_from_file(
                Path("/doc/implementors/mycrate/implementors/sub/trait.Hook.js"),
                Path("/doc"),
            ),
            "mycrate::implementors::sub::Hook",
        )
        self.assertEqual(
            trait_path_from_file(PurePosixPath("/doc/implementors/mycrate/implementors/trait.Hook.js")),
            "mycrate::implementors::Hook",
        )

    def test_doc_dir_must_hold_payload(self) -> None:
        with self.assertRaises(ValueError):
            trait_path_from_file(Path("/doc/core/implementors/ops/trait.Hook.js"), Path("/doc"))
        with self.assertRaises(ValueError):
            trait_path_from_file(Path("/other/implementors/ops/trait.Hook.js"), Path("/doc"))

    def test_trait_path_rejects_other_files(self) -> None:
        with self.assertRaises(ValueError):
            trait_path_from_file(Path("doc/core/ops/deref/trait.DerefMut.js"))
        with self.assertRaises(ValueError):
            trait_path_from_file(Path("doc/implementors/trait.DerefMut.js"))
        with self.assertRaises(ValueError):
            trait_path_from_file(Path("doc/implementors/core/ops/deref/struct.Foo.js"))

    def test_payload_relpath(self) -> None:
        self.assertEqual(
            payload_relpath("core::ops::deref::DerefMut"),
            Path("implementors/core/ops/deref/trait.DerefMut.js"),
        )
        with self.assertRaises(ValueError):
            payload_relpath("DerefMut")

    def test_iter_payload_files(self) -> None:
        self.assertEqual(list(iter_payload_files(FIXTURE_DOC_DIR)), [DEREF_MUT_JS])
        self.assertEqual(list(iter_payload_files(FIXTURE_DOC_DIR / "missing")), [])


if __name__ == "__main__":
    unittest.main()
