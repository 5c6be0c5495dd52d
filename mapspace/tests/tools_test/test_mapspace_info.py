import contextlib
import io
import json
import os
import tempfile
import unittest
from unittest import mock

from mapspace.tools import mapspace_info


class TestMapspaceInfo(unittest.TestCase):
    """
    Tests for the mapspace_info tool.
    """

    def _run(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with mock.patch('sys.argv', ['mapspace-info'] + argv), \
                contextlib.redirect_stdout(out), \
                contextlib.redirect_stderr(err):
            ret = mapspace_info.main()
        return ret, out.getvalue(), err.getvalue()

    def test_layer(self):
        ret, out, _ = self._run(['TEST', '--samples', '2'])
        self.assertEqual(ret, 0)
        self.assertIn('index factorization space size: 226800', out)
        self.assertIn('permutation space size: {}'.format(5040 ** 3), out)
        self.assertIn('spatial split space size: 1', out)
        self.assertIn('factor id 1:', out)
        self.assertNotIn('factor id 2:', out)

    def test_workers(self):
        ret, out, _ = self._run(['TEST', '--workers', '4', '--worker', '1',
                                 '--samples', '1'])
        self.assertEqual(ret, 0)
        self.assertIn('worker 1/4 covers factor ids [56700, 113400)', out)
        self.assertIn('factor id 56700:', out)

    def test_unknown_layer(self):
        ret, _, err = self._run(['aaa'])
        self.assertEqual(ret, 2)
        self.assertIn('not found', err)

    def test_invalid_mapspace_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'mapspace.json')
            with open(path, 'w') as f:
                json.dump({"num_levels": 2, "spatial": {"0": "3"}}, f)
            ret, _, err = self._run(['TEST', '-m', path])
        self.assertEqual(ret, 2)
        self.assertIn('spatial split 3 of level 0 is invalid', err)
