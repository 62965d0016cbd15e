import git
from pathlib import Path
import appdirs
import logging

module_logger = logging.getLogger('libleader.gitwiki')

class Gitwiki:
    """
    Publishes long command output to a wiki repository and returns urls to the pages
    """
    def __init__(self, url: str, web_url_base: str, branch: str = 'master', path: str = None):
        self.url = url
        self.web_url_base = web_url_base.rstrip('/')
        self.branch = branch
        if path:
            self.wiki_path = Path(path)
        else:
            self.wiki_path = Path(appdirs.user_data_dir('pyLeader', 'libleader'), "wiki")
        if self.wiki_path.exists() and self.wiki_path.is_dir():
            module_logger.info(f"using wiki checkout at {self.wiki_path}")
            self.repo = git.Repo(self.wiki_path)
            self.reset()
        else:
            module_logger.info(f"cloning {url} into {self.wiki_path}")
            self.repo = git.Repo.clone_from(url, self.wiki_path)

    def page_url(self, file_path: Path) -> str:
        return self.web_url_base + "/" + "/".join(file_path.with_suffix('').parts)

    def upload(self, filename: str, content: str, is_help: bool, file_extension: str = 'md') -> str:
        self.reset()
        file_path: Path = Path(f"{filename}.{file_extension}")
        if is_help:
            file_path = Path("help", file_path)
        full_path = Path(self.wiki_path / file_path)
        full_path.parent.mkdir(exist_ok=True, parents=True)
        with open(full_path, "w+") as text_file:
            text_file.write(content)
        self.repo.index.add([str(file_path)])
        diff = self.repo.index.diff(self.repo.head.commit)
        if diff:
            module_logger.debug(f"{len(diff)} changed files, pushing {file_path}")
            self.repo.index.commit(f"added {filename}")
            self.repo.remotes.origin.push()
        return self.page_url(file_path)

    def reset(self):
        repo = self.repo
        # blast any current changes
        repo.git.reset('--hard')
        repo.heads[self.branch].checkout()
        # blast any changes there (only if it wasn't checked out)
        repo.git.reset('--hard')
        # remove any extra non-tracked files (.pyc, etc)
        repo.git.clean('-xdf')
        repo.remotes.origin.pull()
