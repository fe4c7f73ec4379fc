"""
Open the GitHub pull request for the current Git branch in a web browser

``go-pr`` looks up the checked-out branch with Git, searches GitHub for open
pull requests authored by a configured user, and opens the first one whose
head branch is the current branch.

Visit <https://github.com/dgp1130/go-pr> for more information.
"""

__version__ = "0.1.0"
__author__ = "Douglas Parker"
__license__ = "MIT"
__url__ = "https://github.com/dgp1130/go-pr"
