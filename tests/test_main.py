import json
import os
import shutil
import tempfile
import toml
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from libfinder import config
from libfinder.cache import CACHE_FILE, CacheStore
from libfinder.main import cli
from libfinder.probe import PREFIX_PATH_ENV


@patch('libfinder.probe.DEFAULT_PREFIXES', [])
@patch.dict(os.environ, {PREFIX_PATH_ENV: ""})
class TestDetectCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        self.include_dir = os.path.join(self.test_dir, "include")
        self.lib_dir = os.path.join(self.test_dir, "lib")
        os.makedirs(os.path.join(self.include_dir, "foo"))
        os.makedirs(self.lib_dir)
        with open(os.path.join(self.include_dir, "foo", "version.h"), "w") as f:
            f.write('#define FOO_VERSION_STR "1.2.0"\n')
        open(os.path.join(self.lib_dir, "libfoo.so"), "w").close()
        hints = [self.include_dir, self.lib_dir]
        self.conf = {
            "project": {"name": "Demo"},
            "packages": {
                "Foo": {
                    "includes": {"Foo_INCLUDE_DIR": "foo/version.h"},
                    "libraries": {"Foo_LIBRARY": "foo"},
                    "hints": hints,
                    "version_header": "foo/version.h",
                    "version_define": "FOO_VERSION_STR",
                    "version": "1.0",
                },
                "Bar": {
                    "includes": {"Bar_INCLUDE_DIR": "bar.h"},
                    "libraries": {"Bar_LIBRARY": "bar"},
                    "hints": hints,
                },
            },
        }
        self._save()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _save(self):
        config.save_config(self.conf, path=self.test_dir)

    def _invoke(self, *args):
        return self.runner.invoke(cli, ["--path", self.test_dir, *args])

    def test_detect_found(self):
        result = self._invoke("detect", "Foo")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Found Foo 1.2.0", result.output)
        self.assertIn("Foo 1.2.0: found", result.output)
        store = CacheStore.load(self.test_dir)
        self.assertEqual(store.get_value("Foo_INCLUDE_DIR"), self.include_dir)
        self.assertTrue(store.is_advanced("Foo_LIBRARY"))

    def test_detect_optional_missing(self):
        result = self._invoke("detect")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("MISSING PACKAGE", result.output)
        self.assertIn("development headers for Bar", result.output)
        self.assertIn("Bar: NOT found (missing_headers)", result.output)

    def test_detect_required_missing_aborts(self):
        self.conf["packages"]["Bar"]["required"] = True
        self._save()

        result = self._invoke("detect")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("REQUIRED PACKAGE NOT FOUND", result.output)
        self.assertIn("continue building Demo", result.output)
        with open(os.path.join(self.test_dir, CACHE_FILE)) as f:
            cached = toml.load(f)
        self.assertFalse(cached["advanced"]["Bar_LIBRARY"])
        self.assertTrue(cached["advanced"]["Foo_LIBRARY"])

    def test_detect_version_too_old(self):
        self.conf["packages"]["Foo"]["version"] = "1.3"
        self._save()

        result = self._invoke("detect", "Foo")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("version 1.3 is the minimum requirement", result.output)

    def test_dependency_detected_first_keeps_its_version(self):
        self.conf["packages"] = {
            "Png": {"libraries": {"Png_LIBRARY": "foo"}, "hints": [self.lib_dir], "depends": ["Foo"]},
            "Foo": dict(self.conf["packages"]["Foo"], version="9.0", required=True),
        }
        self._save()

        result = self._invoke("detect")

        self.assertEqual(result.exit_code, 1)
        self.assertIn("version 9.0 is the minimum requirement", result.output)
        self.assertIn("REQUIRED PACKAGE NOT FOUND", result.output)

    def test_define_override(self):
        header_dir = os.path.join(self.test_dir, "other")
        os.makedirs(header_dir)
        library = os.path.join(self.lib_dir, "libbar.so")
        open(library, "w").close()

        result = self._invoke("detect", "Bar", "-D", f"Bar_INCLUDE_DIR={header_dir}")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Bar: found", result.output)
        self.assertEqual(CacheStore.load(self.test_dir).get_value("Bar_INCLUDE_DIR"), header_dir)

    def test_bad_define(self):
        result = self._invoke("detect", "-D", "novalue")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("NAME=VALUE", result.output)

    def test_detect_json(self):
        result = self._invoke("detect", "--json", "--quiet", "Foo")

        self.assertEqual(result.exit_code, 0)
        payload = json.loads(result.output[result.output.index("[\n"):])
        self.assertEqual(payload[0]["prefix"], "Foo")
        self.assertEqual(payload[0]["state"], "found")
        self.assertEqual(payload[0]["version"], "1.2.0")

    def test_detect_unknown_package(self):
        result = self._invoke("detect", "Nope")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No find module is registered for Nope", result.output)

    def test_detect_without_config(self):
        os.remove(os.path.join(self.test_dir, config.CONFIG_FILE))
        result = self._invoke("detect")
        self.assertIn("No libfinder.toml found", result.output)

    def test_list_packages(self):
        result = self._invoke("list-packages")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Foo (>= 1.0, optional)", result.output)
        self.assertIn("include: Bar_INCLUDE_DIR", result.output)
        self.assertIn("library: Foo_LIBRARY", result.output)


class TestCacheCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        store = CacheStore.load(self.test_dir)
        store.set_value("Foo_INCLUDE_DIR", "/usr/include")
        store.set_value("Foo_LIBRARY", "/usr/lib/libfoo.so")
        store.advanced["Foo_LIBRARY"] = True
        store.save()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _invoke(self, *args):
        return self.runner.invoke(cli, ["--path", self.test_dir, "cache", *args])

    def test_view_hides_advanced(self):
        result = self._invoke("view")
        self.assertIn("Foo_INCLUDE_DIR=/usr/include", result.output)
        self.assertNotIn("Foo_LIBRARY", result.output)

        result = self._invoke("view", "--all")
        self.assertIn("Foo_LIBRARY=/usr/lib/libfoo.so  [advanced]", result.output)

    def test_get(self):
        result = self._invoke("get", "Foo_INCLUDE_DIR")
        self.assertEqual(result.output.strip(), "/usr/include")

    def test_set_and_unset(self):
        self._invoke("set", "Bar_LIBRARY", "/opt/lib/libbar.a")
        self.assertEqual(CacheStore.load(self.test_dir).get_value("Bar_LIBRARY"), "/opt/lib/libbar.a")

        self._invoke("unset", "Bar_LIBRARY")
        self.assertIsNone(CacheStore.load(self.test_dir).get_value("Bar_LIBRARY"))

        result = self._invoke("unset", "Bar_LIBRARY")
        self.assertIn("'Bar_LIBRARY' is not in the cache", result.output)

    def test_clean(self):
        result = self._invoke("clean")
        self.assertEqual(result.exit_code, 0)
        self.assertFalse(os.path.exists(os.path.join(self.test_dir, CACHE_FILE)))


class TestVersionCommand(unittest.TestCase):

    @patch("importlib.metadata.version", return_value="2.0.0")
    def test_version(self, mock_version):
        result = CliRunner().invoke(cli, ["version"])
        self.assertIn("libfinder version 2.0.0", result.output)
        mock_version.assert_called_once_with("libfinder")


if __name__ == "__main__":
    unittest.main()
