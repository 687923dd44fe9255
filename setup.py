from setuptools import setup, find_packages

with open("requirements.txt") as f:
    install_requires = [
        line.strip() for line in f
        if line.strip() and not line.startswith("#")
    ]

# get version from __version__ variable in kalkulator_pajak/__init__.py
from kalkulator_pajak import __version__ as version

setup(
    name="kalkulator_pajak",
    version=version,
    description="Kalkulator Pajak - Perhitungan PPh 21, Pajak Penghasilan dan PPN",
    author="IMOGI",
    author_email="hello@imogi.tech",
    packages=find_packages(exclude=["scripts"]),
    zip_safe=False,
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={"tests": ["pytest"]},
    entry_points={
        "console_scripts": [
            "kalkulator-pajak=kalkulator_pajak.cli:main",
        ],
    },
)
