from setuptools import setup, find_namespace_packages

setup(
    name="gluetesttools",
    version="0.1",
    packages=find_namespace_packages(include=['gluetesttools*']),
    python_requires='>=3.9',
    install_requires=[
        'boto3',
        'boto3-stubs[glue,s3]',
        'pyiceberg[glue,s3fs]'
    ],
    extras_require={
        'test': [
            'pytest',
            'moto[server]'
        ]
    }
)
