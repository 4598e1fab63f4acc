import random
import unittest

from launchpad.services.snippets import HISTORY_FACTS, KNOWLEDGE_NUGGETS, pick_snippets


class SnippetsTest(unittest.TestCase):
    def test_pick_returns_one_nugget_and_one_history_fact(self):
        nugget, history = pick_snippets(random.Random(1))

        self.assertIn(nugget, KNOWLEDGE_NUGGETS)
        self.assertIn(history, HISTORY_FACTS)
        self.assertEqual(nugget.kind, "nugget")
        self.assertEqual(history.kind, "history")

    def test_same_seed_same_pick(self):
        self.assertEqual(pick_snippets(random.Random(42)), pick_snippets(random.Random(42)))

    def test_every_snippet_links_somewhere(self):
        for snippet in KNOWLEDGE_NUGGETS + HISTORY_FACTS:
            with self.subTest(heading=snippet.heading):
                self.assertTrue(snippet.link_url.startswith("https://"))


if __name__ == "__main__":
    unittest.main()
