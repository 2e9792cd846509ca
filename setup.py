from setuptools import setup, find_packages

setup(name="svdimg",
      version="0.0.1",
      author="Tao Jing",
      author_email="jingt20@mails.tsinghua.edu.cn",
      description="image compression by truncated SVD",
      packages=find_packages(exclude=['test', 'test.*', 'benchmark']),
      install_requires=['numpy', 'joblib', 'pillow'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['svdimg=svdimg.cli:main']})
