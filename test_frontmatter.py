#!/usr/bin/env python3
"""
Unit tests for the post frontmatter codec.
"""

import unittest
from archive import frontmatter
from archive.models.post import Post

def make_post(**overrides):
    fields = {
        "id": "2024-05-01-my-first-post",
        "title": "My First Post",
        "excerpt": "A short summary",
        "content": "Hello there.\n\nSecond paragraph.",
        "tags": ["python", "flask"],
        "access": "public",
        "date": "2024-05-01T12:34:56.000Z",
        "read_time": 1,
    }
    fields.update(overrides)
    return Post(**fields)

class TestEncode(unittest.TestCase):
    """Test cases for frontmatter.encode."""

    def test_layout(self):
        """Header fields come in a fixed order, then one blank line, then the body."""
        text = frontmatter.encode(make_post())
        self.assertEqual(text, (
            "---\n"
            "title: My First Post\n"
            "date: 2024-05-01T12:34:56.000Z\n"
            "excerpt: A short summary\n"
            "tags: python, flask\n"
            "access: public\n"
            "readTime: 1\n"
            "---\n"
            "\n"
            "Hello there.\n\nSecond paragraph."
        ))

    def test_empty_tags(self):
        text = frontmatter.encode(make_post(tags=[]))
        self.assertIn("\ntags: \n", text)

    def test_values_are_not_escaped(self):
        text = frontmatter.encode(make_post(title="Colons: everywhere: here"))
        self.assertIn("\ntitle: Colons: everywhere: here\n", text)

class TestDecode(unittest.TestCase):
    """Test cases for frontmatter.decode."""

    def test_round_trip(self):
        post = make_post(content="  Body with padding  \n")
        fields = frontmatter.decode(frontmatter.encode(post))

        self.assertEqual(fields["title"], post.title)
        self.assertEqual(fields["tags"], post.tags)
        self.assertEqual(fields["access"], post.access)
        self.assertEqual(fields["excerpt"], post.excerpt)
        self.assertEqual(fields["content"], "Body with padding")

    def test_date_and_read_time_stay_strings(self):
        fields = frontmatter.decode(frontmatter.encode(make_post(read_time=7)))
        self.assertEqual(fields["date"], "2024-05-01T12:34:56.000Z")
        self.assertEqual(fields["readTime"], "7")

    def test_only_first_separator_splits(self):
        text = "---\ntitle: Time: 10:30: sharp\n---\n\nbody"
        self.assertEqual(frontmatter.decode(text)["title"], "Time: 10:30: sharp")

    def test_missing_fields(self):
        fields = frontmatter.decode("---\ntitle: Only a title\n---\n\nbody")
        self.assertEqual(fields["tags"], [])
        self.assertIsNone(fields["date"])
        self.assertIsNone(fields["readTime"])
        self.assertIsNone(fields["access"])

    def test_empty_tags(self):
        fields = frontmatter.decode("---\ntitle: t\ntags: \n---\n\nbody")
        self.assertEqual(fields["tags"], [])

    def test_line_without_separator(self):
        fields = frontmatter.decode("---\ntitle: t\nstray line\n---\n\nbody")
        self.assertEqual(fields["title"], "t")
        self.assertEqual(fields["content"], "body")

    def test_no_frontmatter(self):
        self.assertIsNone(frontmatter.decode("Just some markdown without a header."))

    def test_unclosed_header(self):
        self.assertIsNone(frontmatter.decode("---\ntitle: t\n\nbody"))

    def test_empty_header(self):
        self.assertIsNone(frontmatter.decode("---\n---\n\nbody"))

    def test_missing_body(self):
        self.assertIsNone(frontmatter.decode("---\ntitle: t\n---\n"))

    def test_body_may_contain_delimiters(self):
        text = "---\ntitle: t\n---\n\nabove\n---\nbelow"
        self.assertEqual(frontmatter.decode(text)["content"], "above\n---\nbelow")

    def test_split(self):
        self.assertEqual(frontmatter.split("---\na: 1\nb: 2\n---\nrest"), ("a: 1\nb: 2", "rest"))

if __name__ == '__main__':
    unittest.main()
