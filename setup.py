from setuptools import setup
setup(
    name='blackjack',
    packages=['blackjack'],
    version='0.1.0',
    license='MIT',
    description='A single round of simplified Blackjack in the terminal',
    keywords=[
        'blackjack',
        'card-game',
        'terminal'
    ],
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.17.0'
    ],
    extras_require={
        'test': ['pytest>=5.0.1']
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Games/Entertainment',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
)
