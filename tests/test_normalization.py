import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_reviewer.lexicon import Lexicon  # noqa: E402
from ats_reviewer.normalize.text import normalize  # noqa: E402
from ats_reviewer.normalize.tokenize import base_form, to_base_set, tokenize  # noqa: E402


class NormalizeTests(unittest.TestCase):
    SAMPLES = (
        "",
        "  Résumé – React.JS (Senior)  ",
        "Node.js/TypeScript\\C++ developer_in_training",
        "“Lead” engineer, it’s • Python ▪ SQL ► AWS",
        "Crème brûlée team — naïve façade",
        "Next.JS and App.tsx plus lib.ts",
        "ﬁnance  \t\n  ops",
        "app.j\u0301s",
        "app.js\u0301",
    )

    def test_folds_accents_dashes_and_parentheses(self):
        self.assertEqual(normalize("  Résumé – React.JS (Senior)  "), "resume react js senior")

    def test_splits_separators_and_tech_suffixes(self):
        self.assertEqual(normalize("Node.js/TypeScript"), "node js typescript")
        self.assertEqual(normalize("snake_case back\\slash"), "snake case back slash")

    def test_marks_inside_tech_suffix_do_not_block_the_split(self):
        self.assertEqual(normalize("app.j\u0301s"), "app js")
        self.assertEqual(normalize("App.JS\u0301"), "app js")

    def test_unifies_quotes_and_drops_bullet_glyphs(self):
        self.assertEqual(normalize("“Lead” it’s"), "\"lead\" it's")
        self.assertEqual(normalize("• Python ▪ SQL"), "python sql")

    def test_non_breaking_space_and_whitespace_collapse(self):
        self.assertEqual(normalize("a\u00a0b \n\t c"), "a b c")

    def test_is_idempotent(self):
        for sample in self.SAMPLES:
            once = normalize(sample)
            self.assertEqual(normalize(once), once, msg=repr(sample))


class TokenizeTests(unittest.TestCase):
    def test_aliases_then_bigrams_of_surviving_words(self):
        tokens = tokenize("node js typescript react")
        self.assertEqual(
            tokens,
            ["node.js", "js", "ts", "react", "node.js js", "js ts", "ts react"],
        )

    def test_drops_stopwords_and_single_characters(self):
        self.assertEqual(
            tokenize("the python and c sql experience"),
            ["python", "sql", "python sql"],
        )

    def test_bigrams_skip_filtered_positions(self):
        tokens = tokenize("docker for kubernetes")
        self.assertIn("docker kubernetes", tokens)
        self.assertNotIn("docker for", tokens)

    def test_alias_lookup_happens_before_stopword_filter(self):
        lexicon = Lexicon.from_mapping({"stopwords": ["golang"], "aliases": {"go": "golang"}})
        self.assertEqual(tokenize("go rust", lexicon), ["rust"])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])

    def test_keeps_duplicates(self):
        self.assertEqual(tokenize("python python"), ["python", "python", "python python"])


class BaseFormTests(unittest.TestCase):
    def test_strips_a_single_suffix(self):
        self.assertEqual(base_form("deploying"), "deploy")
        self.assertEqual(base_form("managed"), "manag")
        self.assertEqual(base_form("matches"), "match")
        self.assertEqual(base_form("skills"), "skill")

    def test_does_not_recurse(self):
        self.assertEqual(base_form("testings"), "testing")
        self.assertEqual(base_form("python"), "python")

    def test_base_set_drops_short_bases(self):
        self.assertEqual(to_base_set(["is", "as", "python", "apis", "python"]), {"python", "api"})


if __name__ == "__main__":
    unittest.main()
