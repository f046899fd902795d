"""Tests for the random transform demo script."""

import logging
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import numpy as np
import yaml

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from geom import Vec4
from scripts import run_transform


class TestTransformScript(unittest.TestCase):
    """Test config loading and the transform run."""

    @classmethod
    def setUpClass(cls):
        cls.test_output_dir = tempfile.mkdtemp()

    @classmethod
    def tearDownClass(cls):
        if os.path.exists(cls.test_output_dir):
            shutil.rmtree(cls.test_output_dir)

    def test_default_config(self):
        config = run_transform.load_config()
        self.assertIn("seed", config)
        self.assertTrue(all(len(p) == 3 for p in config["points"]))

    def test_load_custom_config(self):
        path = os.path.join(self.test_output_dir, "custom.yaml")
        with open(path, "w") as f:
            yaml.safe_dump({"seed": 1, "n_transforms": 0, "points": [[1, 2, 3]]}, f)

        config = run_transform.load_config(path)
        self.assertEqual(config["points"], [[1, 2, 3]])

    def test_zero_transforms_is_identity(self):
        results = run_transform.run({"seed": 0, "n_transforms": 0, "points": [[1, 2, 3]]})
        p, q = results[0]
        self.assertEqual(p, Vec4(1, 2, 3, 1))
        self.assertEqual(q, Vec4(1, 2, 3, 1))

    def test_run_is_reproducible(self):
        config = {"seed": 11, "n_transforms": 3, "points": [[1, 0, 0], [0, 1, 2]]}
        first = run_transform.run(config)
        second = run_transform.run(config)
        self.assertEqual(first, second)

        for p, q in first:
            self.assertEqual(q.w, 1.0)
            np.testing.assert_allclose(q.as_array()[:3], p.as_array()[:3] / p.w)

    def test_bad_point(self):
        with self.assertRaises(ValueError):
            run_transform.run({"seed": 0, "n_transforms": 1, "points": [[1, 2]]})

    def test_negative_transform_count(self):
        with self.assertRaises(ValueError):
            run_transform.compose_transforms(np.random.default_rng(0), -1)


class TestTransformMain(unittest.TestCase):
    """Test the command-line entry point."""

    def setUp(self):
        root = logging.getLogger()
        self.addCleanup(root.setLevel, root.level)
        self.tmp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp_dir)

    def _main(self, *args):
        with mock.patch.object(sys, "argv", ["run_transform.py", *args]):
            run_transform.main()

    def test_missing_config_exits(self):
        missing = os.path.join(self.tmp_dir, "missing.yaml")
        with self.assertLogs("transform", level="ERROR") as logs:
            with self.assertRaises(SystemExit) as ctx:
                self._main("--config", missing)
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("missing.yaml", logs.output[0])

    def test_seed_overrides_config(self):
        with mock.patch.object(run_transform, "run") as run:
            self._main("--seed", "99")
        config = run.call_args[0][0]
        self.assertEqual(config["seed"], 99)

    def test_seed_defaults_to_config(self):
        with mock.patch.object(run_transform, "run") as run:
            self._main()
        self.assertEqual(run.call_args[0][0]["seed"], run_transform.load_config()["seed"])

    def test_verbose_sets_debug(self):
        with mock.patch.object(run_transform, "run"):
            self._main("--verbose")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_unknown_log_level_exits(self):
        path = os.path.join(self.tmp_dir, "loud.yaml")
        with open(path, "w") as f:
            yaml.safe_dump({"seed": 0, "n_transforms": 0, "points": [], "log_level": "LOUD"}, f)

        with mock.patch.object(run_transform, "run") as run:
            with self.assertRaises(SystemExit) as ctx:
                self._main("--config", path)
        self.assertEqual(ctx.exception.code, 1)
        run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
