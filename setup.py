from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize
import os

# The persistent list is plain Python; Cython compiles it in place when a C
# compiler is available and the pure module is used otherwise.
py_path = os.path.join("mal", "types", "persistent_list.py")

setup(
    name="mal",
    version="0.1.0",
    description="A small Lisp interpreter: reader, environments and a tree-walking evaluator",
    packages=find_packages(include=["mal", "mal.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    ext_modules=cythonize(
        Extension(
            name="mal.types.persistent_list",  # module path for import
            sources=[py_path],
            optional=True,
        ),
        compiler_directives={'language_level': "3", "annotation_typing": False},
    ),
    zip_safe=False,
)
