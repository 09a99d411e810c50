from setuptools import setup

setup(
    name='triwalk',
    version='0.1',
    packages=['triwalk', 'triwalk.grid', 'triwalk.plot',
              'triwalk.spatial', 'triwalk.walk'],
    install_requires=['numpy', 'scipy', 'matplotlib', 'pandas'],
    extras_require={'test':['pytest']},
    license='MIT',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
