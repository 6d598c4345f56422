from setuptools import setup, find_packages

setup(
    name='depthzoom',
    version='0.1.0',
    author='depthzoom contributors',
    description='Dolly-zoom camera control: change field of view while keeping a reference plane the same size on screen.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'examples']),
    include_package_data=True,
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics :: 3D Rendering',
        'Topic :: Scientific/Engineering :: Visualization',
    ],
    python_requires='>=3.6',
)
