from setuptools import setup, find_packages

setup(
    name='nugget',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'colored==2.2.3',
        'halo==0.0.31',
        'ffmpeg-python==0.2.0',
        'pysubs2==1.7.3',
        'python-dotenv==1.0.1',
        'yt-dlp>=2024.8.6',
    ],
    extras_require={
        'test': ['pytest>=7.4'],
    },
    entry_points='''
        [console_scripts]
        nugget=nugget.__main__:main
    ''',
    license='MIT',
    keywords='video subtitles captions ffmpeg clips',
    description='Cut video intervals and burn re-timed captions into them',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
