"""Compile ``%``-coded patterns once, then render log records into
bytes quickly, with cached time zone strings and hand-rolled
fixed-width date and number encoding.

BSD-licensed, see LICENSE for more details.
"""

from setuptools import setup, find_packages


__author__ = 'Mahmoud Hashemi'
__version__ = '0.1.0'
__contact__ = 'mahmoud@hatnote.com'
__license__ = 'BSD'

desc = ('Pattern-driven, precompiled log record layouts rendering'
        ' straight to bytes.')


setup(name='patlayout',
      version=__version__,
      description=desc,
      long_description=__doc__,
      author=__author__,
      author_email=__contact__,
      packages=find_packages(),
      install_requires=['boltons>=20.0.0'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.7',
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      classifiers=[
          'Intended Audience :: Developers',
          'Topic :: System :: Logging',
          'Topic :: Utilities',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy',
      ]
)
