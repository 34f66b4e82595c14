"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='reptag',
	version='0.0.1',
	packages=['reptag', ],
	entry_points={
		'console_scripts': ["reptag = reptag.cmdline:main"],
	},
	license='MIT',
	description='Representation tags for tagged runtime values, and switchpatch dispatch on their names',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
