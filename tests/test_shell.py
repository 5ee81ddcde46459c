"""
Stream processor and command-line tests.

The TestShell cases drive Shell.process_stream() in-process; the
TestCommandLine cases run the interpreter as a separate program.

Run with: python -m pytest tests/test_shell.py -v
"""

import io
import os
import stat
import subprocess
import sys
import tempfile
import unittest
from unittest import mock

from witsh.core.config_loader import Config, ShellConfig
from witsh.exceptions import BatchFileError, NormalizationError
from witsh.shell.shell import Shell

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ERROR_LINE = "An error has occurred\n"


def write_script(directory, name, body):
    path = os.path.join(directory, name)
    with open(path, 'w') as f:
        f.write("#!/bin/sh\n" + body)
    os.chmod(path, stat.S_IRWXU)
    return path


class TestShell(unittest.TestCase):

    def setUp(self):
        self._old_cwd = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        self.workdir = os.path.realpath(self._tmp.name)
        self.bindir = os.path.join(self.workdir, 'bin')
        os.mkdir(self.bindir)
        write_script(self.bindir, 'toucher', 'touch "$1"\n')
        os.chdir(self.workdir)

        config = Config(shell=ShellConfig(prompt="test> ", default_path=[self.bindir]))
        self.shell = Shell(config)

        patcher = mock.patch('witsh.shell.executor.report_error')
        self.report = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        os.chdir(self._old_cwd)
        self._tmp.cleanup()

    def run_stream(self, text, interactive=False):
        output = io.StringIO()
        self.shell.process_stream(io.StringIO(text), interactive=interactive, output=output)
        return output.getvalue()

    def test_prompt_before_each_read(self):
        output = self.run_stream("toucher a\ntoucher b\n", interactive=True)

        # two lines plus the read that hits end of input
        self.assertEqual(output, "test> " * 3)
        self.assertTrue(os.path.exists('a'))
        self.assertTrue(os.path.exists('b'))

    def test_no_prompt_in_batch_mode(self):
        output = self.run_stream("toucher a\n")
        self.assertEqual(output, "")
        self.assertTrue(os.path.exists('a'))

    def test_exit_stops_reading(self):
        output = self.run_stream("toucher a\nexit\ntoucher b\n", interactive=True)

        self.assertTrue(self.shell.exiting)
        self.assertEqual(output, "test> " * 2)
        self.assertEqual(self.shell.lines_executed, 2)
        self.assertTrue(os.path.exists('a'))
        self.assertFalse(os.path.exists('b'))

    def test_exit_runs_sibling_segments(self):
        self.run_stream("toucher a & exit & toucher b\ntoucher c\n")

        self.assertTrue(os.path.exists('a'))
        self.assertTrue(os.path.exists('b'))
        self.assertFalse(os.path.exists('c'))

    def test_exit_misuse_keeps_reading(self):
        self.run_stream("exit now\nexit > f\ntoucher a\n")

        self.assertFalse(self.shell.exiting)
        self.assertEqual(self.report.call_count, 2)
        self.assertTrue(os.path.exists('a'))
        self.assertFalse(os.path.exists('f'))

    def test_last_line_without_newline(self):
        self.run_stream("toucher a\ntoucher b")
        self.assertTrue(os.path.exists('b'))

    def test_single_terminator_stripped(self):
        self.run_stream("toucher a\r\n")
        self.assertTrue(os.path.exists('a'))

    def test_blank_lines_ignored(self):
        self.run_stream("\n   \n\t\ntoucher a\n")
        self.report.assert_not_called()
        self.assertEqual(self.shell.lines_executed, 4)

    def test_normalization_failure_stops_stream(self):
        with mock.patch('witsh.shell.shell.normalize_line', side_effect=NormalizationError()), \
                mock.patch('witsh.shell.shell.report_error') as report:
            self.run_stream("toucher a\ntoucher b\n")

        report.assert_called_once()
        self.assertEqual(self.shell.lines_executed, 0)
        self.assertFalse(os.path.exists('a'))

    def test_missing_batch_file(self):
        with self.assertRaises(BatchFileError):
            self.shell.run_batch(os.path.join(self.workdir, 'missing.txt'))

    def test_run_batch(self):
        script = os.path.join(self.workdir, 'script.txt')
        with open(script, 'w') as f:
            f.write("toucher one & toucher two\ncd bin\ntoucher three\n")

        self.shell.run_batch(script)

        self.assertTrue(os.path.exists(os.path.join(self.workdir, 'one')))
        self.assertTrue(os.path.exists(os.path.join(self.workdir, 'two')))
        self.assertTrue(os.path.exists(os.path.join(self.bindir, 'three')))

    def test_run_batch_carriage_return_inside_line(self):
        write_script(self.bindir, 'args', 'echo "$#:$*"\n')
        script = os.path.join(self.workdir, 'script.txt')
        with open(script, 'wb') as f:
            f.write(b"args a\rb > o\n")

        self.shell.run_batch(script)

        self.report.assert_not_called()
        self.assertEqual(self.shell.lines_executed, 1)
        with open(os.path.join(self.workdir, 'o')) as f:
            self.assertEqual(f.read(), "2:a b\n")


class TestCommandLine(unittest.TestCase):
    """Run the interpreter as a program."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.workdir = os.path.realpath(self._tmp.name)
        self.env = dict(os.environ)
        self.env.pop('WITSH_CONFIG', None)
        self.env['PYTHONPATH'] = os.pathsep.join(
            p for p in (REPO_ROOT, self.env.get('PYTHONPATH')) if p
        )

    def tearDown(self):
        self._tmp.cleanup()

    def witsh(self, *args, stdin=""):
        return subprocess.run(
            [sys.executable, '-m', 'witsh.main', *args],
            input=stdin,
            capture_output=True,
            text=True,
            cwd=self.workdir,
            env=self.env,
            timeout=30,
        )

    def write(self, name, text):
        path = os.path.join(self.workdir, name)
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_too_many_arguments(self):
        proc = self.witsh('a', 'b')
        self.assertEqual(proc.returncode, 1)
        self.assertEqual(proc.stderr, ERROR_LINE)
        self.assertEqual(proc.stdout, "")

    def test_unopenable_batch_file(self):
        proc = self.witsh(os.path.join(self.workdir, 'missing.txt'))
        self.assertEqual(proc.returncode, 1)
        self.assertEqual(proc.stderr, ERROR_LINE)

    def test_interactive_prompt(self):
        proc = self.witsh(stdin="exit\n")
        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stdout, "witsshell> ")
        self.assertEqual(proc.stderr, "")

    def test_interactive_end_of_input(self):
        proc = self.witsh(stdin="\n")
        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stdout, "witsshell> witsshell> ")

    def test_errors_are_uniform(self):
        script = self.write('script.txt', (
            "exit extra\n"
            "ls > a > b\n"
            "cd\n"
            "cd /does/not/exist\n"
            "path\n"
            "ls\n"
        ))
        proc = self.witsh(script)

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stderr, ERROR_LINE * 5)
        self.assertEqual(proc.stdout, "")

    def test_batch_cd_and_redirect(self):
        if not os.access('/bin/pwd', os.X_OK):
            self.skipTest("/bin/pwd not available")

        target = os.path.join(self.workdir, 'target')
        os.mkdir(target)
        script = self.write('script.txt', f"pwd\ncd {target}\npwd > out.txt\n")

        proc = self.witsh(script)

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stderr, "")
        self.assertEqual(proc.stdout.strip(), self.workdir)
        self.assertNotIn("witsshell>", proc.stdout)
        with open(os.path.join(target, 'out.txt')) as f:
            self.assertEqual(f.read().strip(), target)

    def test_config_file(self):
        bindir = os.path.join(self.workdir, 'bin')
        os.mkdir(bindir)
        write_script(bindir, 'hello', 'echo hello\n')
        self.env['WITSH_CONFIG'] = self.write('config.json', (
            '{"shell": {"prompt": "$ ", "default_path": ["%s"]}}' % bindir
        ))

        proc = self.witsh(stdin="hello\n")

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stdout, "$ hello\n$ ")
        self.assertEqual(proc.stderr, "")

    def test_carriage_return_on_standard_input(self):
        bindir = os.path.join(self.workdir, 'bin')
        os.mkdir(bindir)
        write_script(bindir, 'args', 'echo "$#:$*"\n')
        self.env['WITSH_CONFIG'] = self.write('config.json', (
            '{"shell": {"default_path": ["%s"]}}' % bindir
        ))

        proc = self.witsh(stdin="args a\rb > o\nexit\n")

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stderr, "")
        with open(os.path.join(self.workdir, 'o')) as f:
            self.assertEqual(f.read(), "2:a b\n")

    def test_broken_config_falls_back_to_defaults(self):
        self.env['WITSH_CONFIG'] = self.write('config.json', '{not json')

        proc = self.witsh(stdin="exit\n")

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stderr, ERROR_LINE)
        self.assertEqual(proc.stdout, "witsshell> ")


if __name__ == '__main__':
    unittest.main()
