#!/usr/bin/env python3
#
# DiveCalc - recreational dive planning library.
#
# Copyright (C) 2026 by DiveCalc Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup, find_packages

import divecalc

setup(
    name='divecalc',
    version=divecalc.__version__,
    description='DiveCalc - recreational dive planning library',
    author='DiveCalc Team',
    packages=find_packages('.'),
    scripts=('bin/dc-plan', 'bin/dc-diag'),
    include_package_data=True,
    long_description=\
"""\
DiveCalc is Python recreational dive planning library. It implements
dive physics calculations (SAC, MOD, EAD, best mix, Boyle's law, nitrox
blending) and Recreational Dive Planner table lookups (no decompression
limits, pressure groups, surface interval credit and repetitive dive
times).
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive planner nitrox rdp',
    license='GPL',
    python_requires='>=3.6',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
