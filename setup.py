# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import setuptools

with open("README.md", "r", encoding='utf_8') as fh:
    long_description = fh.read()

install_requires=[
    'pyyaml', 'rich', 'psutil'
]

setuptools.setup(
    name="locpairs",
    version="0.1.0",
    description="Total distance and similarity score between two columns of location IDs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # package dirs have no __init__.py so we need namespace discovery
    packages=setuptools.find_namespace_packages(include=['locpairs', 'locpairs.*']),
	license='MIT',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    include_package_data=True,
    install_requires=install_requires,
    extras_require={'test': ['pytest']},
)
