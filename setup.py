"""
Installs the histogram equalization module.
"""

#from os.path import join, abspath, dirname
from setuptools import setup, find_packages

setup(
    name='histeq',
    version='0.2.0',
    description='Global histogram equalization of grayscale and RGB images',
    #long_description=open(join(abspath(dirname(__file__)), 'README.md'), encoding='utf-8').read(),
    #long_description_content_type='text/markdown',
    #url='...',
    author='Jeffrey Bush',
    author_email='bushj@moravian.edu',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Multimedia :: Graphics :: Editors :: Raster-Based',
        'Topic :: Scientific/Engineering :: Image Recognition',
        #'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='image-processing histogram-equalization contrast-enhancement',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    python_requires='>=3.7, <4',
    install_requires=['numpy>=1.15', 'scipy>=1', 'imageio>=2.9', 'pillow'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': [
            'histeq=histeq.__main__:main',
        ],
    },
)
