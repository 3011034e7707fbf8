from setuptools import find_packages, setup

setup(
    name='until-connected',
    version='0.1.0',
    description='Wait until a TCP port accepts connections, retrying a bounded number of times.',
    packages=find_packages(include=['until_connected', 'until_connected.*']),
    package_data={'until_connected': ['logging.conf']},
    python_requires='>=3.11',
    install_requires=['click', 'pydantic>=2', 'pyyaml'],
    extras_require={
        'test': ['pytest', 'pytest-asyncio', 'pytest-mock', 'pytest-timeout'],
    },
    entry_points={'console_scripts': ['until-connected=until_connected.main:until_connected_cli']},
)
