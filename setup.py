"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='petitlua',
	version='0.1.0',
	packages=['petitlua'],
	license='MIT',
	description='Evaluation core of a tree-walking interpreter for a small Lua-like language',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
