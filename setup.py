from setuptools import setup

setup(
    name='pyflowstats',
    version='0.1.0',
    packages=['pyflowstats'],
    license='MIT',
    description='package for daily and cumulative streamflow statistics by calendar or water year',
    install_requires=["pandas", "numpy", "scipy"],
    extras_require={"test": ["pytest"]}
)
