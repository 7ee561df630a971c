from Cython.Build import cythonize
from setuptools import Extension, find_packages, setup

cythonized_extensions = cythonize(
    [
        Extension(
            f"picomsgpack.serde.{name}",
            [f"src/picomsgpack/serde/{name}.py"],
            extra_compile_args=[
                "-O3",
                "-march=native",
                "-Wno-unused-function",
                "-Wno-unused-variable",
            ],
            language="c",
        )
        for name in ("_scalars", "_composites")
    ],
    compiler_directives={
        "language_level": 3,
        "boundscheck": False,
        "wraparound": False,
        "annotation_typing": False,
        "nonecheck": False,
        "initializedcheck": False,
    },
    build_dir="build/cython",
)

if __name__ == "__main__":
    setup(
        name="picomsgpack",
        version="0.1.0",
        description="Picomsgpack MessagePack packer",
        python_requires=">=3.9",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=[
            "pydantic>=2",
            "structlog",
        ],
        extras_require={
            "test": [
                "hypothesis",
                "msgpack>=1.0",
                "pytest",
            ],
        },
        ext_modules=cythonized_extensions,
    )
