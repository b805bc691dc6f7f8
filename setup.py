from setuptools import find_packages, setup

setup(
  name = 'hexprobe',
  packages = find_packages(where='src'),
  package_dir = {'': 'src'},
  version = '1.0.0',
  license='GNU',
  description = 'command line hex viewer with byte classification and statistics',
  author = 'Adam Musciano',
  author_email = 'amusciano@gmail.com',
  keywords = ['hexdump', 'binary', 'forensics'],
  python_requires='>=3.11',
  install_requires=[
"typer>=0.9.0",
"rich>=13.0.0",
"pydantic>=2.0.0",
"pydantic-settings>=2.0.0",
"PyYAML>=6.0",
      ],
  extras_require={
    'test': [
      'pytest>=7.0.0',
    ],
  },
  entry_points={
    'console_scripts': [
      'hexprobe=hexprobe.cli.main:run_cli',
    ],
  },
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Topic :: Security',
    'Topic :: Utilities',
    'License :: OSI Approved :: GNU General Public License (GPL)',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
  ],
)
