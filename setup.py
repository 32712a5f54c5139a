from setuptools import find_packages, setup

setup(
    name='cfn-autonames',
    version='0.1',
    py_modules=['cfnautonames'],
    packages=find_packages(include=['autonames', 'autonames.*']),
    install_requires=[
        'Click',
        'PyYAML',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points='''
        [console_scripts]
        cfnautonames=cfnautonames:cli
    ''',
)
