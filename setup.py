from setuptools import setup

setup(
    name='termtree',
    packages=["termtree"],
    version='0.1',
    python_requires='>=3.7',
    description='Render trees of labeled nodes as text diagrams with box-drawing connectors.',
    license='MIT',
    install_requires=[],
    extras_require={
        "torch": ["numpy", "torch"],
        "test": ["pytest", "numpy", "torch"],
    },
    keywords=['tree', 'render', 'ascii tree', 'pretty print', 'tensor tree'],  # Keywords that define your package best
    classifiers=[
        'Development Status :: 4 - Beta',
        # Chose either "3 - Alpha", "4 - Beta" or "5 - Production/Stable" as the current state of your package
        'Intended Audience :: Developers',  # Define that your audience are developers
        'Topic :: Text Processing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
