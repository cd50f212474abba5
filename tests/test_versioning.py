import unittest
from libfinder.versioning import compare_versions, version_components, version_equal, version_less


class TestVersioning(unittest.TestCase):

    def test_components_are_numeric(self):
        self.assertEqual(version_components("1.10.2"), (1, 10, 2))
        self.assertEqual(version_components(" 3.0 "), (3, 0))

    def test_non_pep440_versions_use_leading_integers(self):
        self.assertEqual(version_components("1.2.3-beta"), (1, 2, 3))
        self.assertEqual(version_components("2.1c.x"), (2, 1, 0))

    def test_numeric_not_lexical(self):
        self.assertTrue(version_less("1.9", "1.10"))
        self.assertFalse(version_less("1.10", "1.9"))
        self.assertEqual(compare_versions("10.0", "9.99"), 1)

    def test_missing_components_are_zero(self):
        self.assertTrue(version_equal("2.0", "2.0.0"))
        self.assertTrue(version_equal("2", "2.0.0.0"))
        self.assertTrue(version_less("2.0", "2.0.1"))
        self.assertEqual(compare_versions("1.2.0.1", "1.2"), 1)

    def test_equal(self):
        self.assertEqual(compare_versions("1.4.2", "1.4.2"), 0)
        self.assertFalse(version_equal("1.4.2", "1.4.3"))


if __name__ == '__main__':
    unittest.main()
