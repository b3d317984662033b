"""Tests for the filename-based alt-text fallback."""

import socket
import unittest
from unittest.mock import patch

from quickcaption.services.ai.alttext.fallback import filename_tokens, generate_placeholder_alt_text


class FilenameTokensTests(unittest.TestCase):
    def test_strips_extension_and_separators(self):
        self.assertEqual(filename_tokens("sunset-beach_photo.jpeg"), ["sunset", "beach", "photo"])

    def test_only_last_extension_removed(self):
        self.assertEqual(filename_tokens("archive.tar.gz"), ["archive.tar"])

    def test_repeated_separators_do_not_produce_empty_tokens(self):
        self.assertEqual(filename_tokens("--a__b  c-.png"), ["a", "b", "c"])

    def test_no_extension(self):
        self.assertEqual(filename_tokens("README"), ["README"])

    def test_dot_followed_by_slash_is_not_an_extension(self):
        self.assertEqual(filename_tokens("dir.v2/photo"), ["dir.v2/photo"])


class PlaceholderAltTextTests(unittest.TestCase):
    def test_sunset_beach(self):
        r = generate_placeholder_alt_text("sunset-beach.jpg")
        self.assertEqual(r.accessible, "An image showing sunset beach.")
        self.assertEqual(r.short, "sunset beach")
        self.assertEqual(r.seo, "sunset beach image.")

    def test_empty_filename_keeps_leading_space_in_seo(self):
        r = generate_placeholder_alt_text("")
        self.assertEqual(r.accessible, "An image showing content.")
        self.assertEqual(r.short, "Image")
        # Known quirk: no tokens leaves a leading space before "image."
        self.assertEqual(r.seo, " image.")

    def test_extension_only_behaves_like_empty(self):
        r = generate_placeholder_alt_text(".png")
        self.assertEqual(r.short, "Image")
        self.assertEqual(r.seo, " image.")

    def test_short_truncated_to_eight_words(self):
        r = generate_placeholder_alt_text("one-two-three-four-five-six-seven-eight-nine-ten.png")
        self.assertEqual(r.short, "one two three four five six seven eight")
        self.assertEqual(r.accessible, "An image showing one two three four five six seven eight nine ten.")
        self.assertEqual(r.seo, "one two three four five six seven eight nine ten image.")

    def test_default_upload_name(self):
        r = generate_placeholder_alt_text("image")
        self.assertEqual(r.accessible, "An image showing image.")
        self.assertEqual(r.short, "image")
        self.assertEqual(r.seo, "image image.")

    def test_deterministic(self):
        names = ["", "a.png", "IMG_2041.HEIC", "my holiday-pics_2024.final.webp"]
        for name in names:
            self.assertEqual(generate_placeholder_alt_text(name), generate_placeholder_alt_text(name))

    def test_no_network_access(self):
        with patch.object(socket, "socket", side_effect=AssertionError("network used")):
            r = generate_placeholder_alt_text("cat-on-sofa.png")
        self.assertEqual(r.short, "cat on sofa")

    def test_result_is_immutable(self):
        from pydantic import ValidationError

        r = generate_placeholder_alt_text("cat.png")
        with self.assertRaises(ValidationError):
            r.short = "dog"
