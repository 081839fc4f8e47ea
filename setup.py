from setuptools import setup

setup(name='qsortlib',
      version='0.1rc1',
      description='In-place quicksort with a reusable partition primitive',
      packages=['qsortlib'],
      scripts=['scripts/qsort-median'],
      py_modules=['median'],
      python_requires='>=3.6',
      extras_require={
          'test': ['coverage', 'pytest'],
      },
      classifiers=[
      'Development Status :: 4 - Beta',
      'Programming Language :: Python :: 3',
      'Intended Audience :: Developers',
      ]
      )
