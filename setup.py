from setuptools import setup, Extension
from Cython.Build import cythonize

# Compile the per-read hot loops; the pure Python module is used if this fails
extensions = [
    Extension(
        "dinuc_collapse.collapse",
        ["src/dinuc_collapse/collapse.py"],
        include_dirs=[],
        language="c",
        optional=True,
    ),
]

setup(
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': 3,
            'boundscheck': True,  # Enable bounds checking for safety
            'wraparound': False,
            'cdivision': True,
            'nonecheck': False,
        }
    ),
    zip_safe=False,
)
