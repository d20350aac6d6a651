#
# MIT License
#
# (C) Copyright 2026 Hewlett Packard Enterprise Development LP
#
# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included
# in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR
# OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE,
# ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
import nox


@nox.session(python='3')
def unittests(session):
    """ azvm.hardening unit tests """
    session.install('-r', 'requirements-test.txt')
    session.install('-r', 'requirements.txt')
    session.install('.')  # azvm.hardening packages
    runtime = session.env.get('BUILDENV', 'local')

    # Local runs get HTML coverage reports, Pipeline runs get XML
    cmd = [
        'py.test',
        '--cov-config=.coveragerc',
        '--cov=azvm.hardening',
    ]
    if runtime == 'local':
        cmd.extend(['--cov-report', 'html:htmlcov'])
    elif runtime == 'pipeline':
        cmd.extend(['--cov-report', 'xml:results/coverage.xml'])
        cmd.append('--junitxml=results/unittests.xml')

    session.run(*cmd, 'tests')


@nox.session(python='3')
def lint(session):
    session.install('-r', 'requirements-lint.txt')
    session.install('-r', 'requirements.txt')
    session.install('.')
    runtime = session.env.get('BUILDENV', 'local')
    cmd = ['flake8', '--tee']
    if runtime == 'pipeline':
        cmd.append('--output-file=results/flake8.txt')
    cmd.extend(['./src/azvm', './tests'])
    session.run(*cmd)
