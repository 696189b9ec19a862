from setuptools import setup, find_packages

# Read the contents of the README file
with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='panelarray',
    version='0.1.0',
    packages=find_packages(include=['panelarray', 'panelarray.*']),  # Include only packages within the "panelarray" folder

    # Metadata
    author='panelarray developers',
    description='Grouped numpy arrays for panel data analysis.',
    license='MIT',

    # Dependencies
    install_requires=[
        'numpy',  # for storage and numerical operations
        'narwhals',  # for dataframe-agnostic input
        'pandas',  # for DataFrame output
        'scikit-learn',  # for the PanelDemeaner transformer
        'joblib',  # for parallel per-unit maps
        'tqdm',  # for progress bar
        'matplotlib',  # for plotting
    ],
    extras_require={
        'test': ['pytest'],
    },

    # README file content
    long_description=long_description,
    long_description_content_type='text/markdown',

    # Other configurations
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
