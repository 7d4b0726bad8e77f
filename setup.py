from setuptools import setup

setup(
    name='atmfjstc-bit-array',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.bit_array'],

    extras_require={
        'test': ['pytest>=6'],
    },

    zip_safe=True,

    description="Manipulation of explicit bit arrays and conversion to/from bit strings, hex, integers and byte text",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
