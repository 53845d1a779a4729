"""Implementation for the ``lazy github`` commands.

Every external command runs once. Clone, commit (in ``push``), pull and push
failures are fatal; dependency install/build steps and the "nothing to
commit" outcome of ``pr`` are not.
"""

from __future__ import annotations

from pathlib import Path

from .. import editor, git, log, paths, project
from .. import exec as exec_util
from ..errors import PreconditionError, StepFailedError, UsageError
from ..github import GithubClient, PullRequest
from ..packages import PackageManager, detect_package_manager

CLONE_USAGE = "lazy github clone <repo-url> [tech]"
PUSH_USAGE = 'lazy github push "<commit-message>"'
PULL_USAGE = 'lazy github pull <base-branch> "<pr-title>"'
PR_USAGE = 'lazy github pr <base-branch> "<commit-message>"'


def github_init(cwd: Path) -> None:
    """Initialize a git repository in ``cwd``; refuses to reinitialize.

    Example:
        $ lazy github init
    """
    log.info("🛠️ Initializing new Git repository...")
    if git.has_git_dir(cwd):
        raise PreconditionError("⚠️ Git repository already initialized in this directory.")
    result = git.init(cwd)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ git init failed.", detail=exec_util.failure_detail(["git", "init"], result)
        )
    log.success("✅ Git repository initialized successfully!")


def install_and_build(project_root: Path) -> PackageManager | None:
    """Install manifest dependencies and run ``build`` when one is declared.

    Both steps are best-effort. Returns the package manager used, or ``None``
    when the project has no ``package.json``.
    """
    manifest = project.read_manifest(project_root)
    if manifest is None:
        log.info("⚠️ No package.json found; skipping dependency install & build.")
        return None
    manager = detect_package_manager()
    log.info("📦 Installing dependencies...")
    log.info(f"🔧 Using {manager.value}...")
    install_argv = manager.install_argv()
    result = exec_util.run(install_argv, cwd=project_root)
    if not exec_util.succeeded(result):
        log.warning("⚠️ Dependency install failed; continuing.")
        log.debug(exec_util.failure_detail(install_argv, result))
    if project.declares_script(manifest, "build"):
        log.info("🏗️ Build script found. Building the project...")
        build_argv = manager.run_script_argv("build")
        result = exec_util.run(build_argv, cwd=project_root)
        if not exec_util.succeeded(result):
            log.warning("⚠️ Build failed; continuing.")
            log.debug(exec_util.failure_detail(build_argv, result))
    else:
        log.info("ℹ️ No build script found; skipping build.")
    return manager


def github_clone(cwd: Path, repo_url: str | None, tech: str | None = None) -> Path:
    """Clone ``repo_url`` into ``cwd``, then install, build and open an editor.

    ``tech`` is accepted for compatibility and ignored; the stack is detected
    from the cloned files.

    Returns:
        The cloned project root.
    """
    del tech
    if not repo_url:
        raise UsageError("❌ Repo URL is required.", usage=CLONE_USAGE)
    log.info(f"🔗 Cloning {repo_url} ...")
    result = git.clone(repo_url, cwd)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Clone failed.",
            detail=exec_util.failure_detail(["git", "clone", repo_url], result),
        )
    project_root = cwd / paths.repo_dir_name(repo_url)
    log.info(f"📁 Project directory: {project_root.name}")

    install_and_build(project_root)

    detected = editor.detect_editor()
    if detected is None:
        log.info("💡 VS Code not found. You can manually open the project folder.")
    else:
        argv, name = detected
        log.info(f"🚀 Opening project in {name}...")
        if not exec_util.run_detached(argv, cwd=project_root):
            log.warning(f"⚠️ Could not start {name}.")

    log.success("✅ Clone setup complete! Don't forget to commit and push your changes.")
    return project_root


def _require_branch(cwd: Path, message: str) -> str:
    branch = git.current_branch(cwd)
    if branch is None:
        raise PreconditionError(message)
    return branch


def github_push(cwd: Path, message: str | None) -> None:
    """Stage everything, commit with ``message`` and push the current branch."""
    if not message:
        raise UsageError("⚠️ Commit message is required.", usage=PUSH_USAGE)

    log.info("📦 Staging changes...")
    result = git.add_all(cwd)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Staging failed.", detail=exec_util.failure_detail(["git", "add", "."], result)
        )

    log.info("📝 Committing changes...")
    result = git.commit(cwd, message)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Commit failed. Nothing to commit or error occurred.",
            detail=exec_util.failure_detail(["git", "commit", "-m", message], result),
        )

    branch = _require_branch(cwd, "❌ Could not detect branch. Are you in a git repo?")
    log.info(f"🚀 Pushing to origin/{branch}...")
    result = git.push(cwd, branch)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Push failed. Please check your network or branch.",
            detail=exec_util.failure_detail(["git", "push", "origin", branch], result),
        )
    log.success(f"✅ Changes pushed to origin/{branch} 🎉")


def open_pull_request(
    cwd: Path,
    base: str,
    head: str,
    title: str,
    *,
    client: GithubClient | None = None,
) -> str:
    """Create a pull request from ``head`` onto ``base`` through ``gh``."""
    log.info(f"🔁 Creating pull request: {head} → {base}")
    log.info(f"📝 Title: {title}")
    active = client or GithubClient()
    url = active.create_pull_request(
        PullRequest(base=base, head=head, title=title, body=title), cwd=cwd
    )
    log.success("✅ Pull request created successfully! 🎉")
    return url


def github_pull(cwd: Path, base: str | None, title: str | None) -> str:
    """Open a pull request from the current branch onto ``base``."""
    if not base or not title:
        raise UsageError("❌ Base branch and pull request title are required.", usage=PULL_USAGE)
    head = _require_branch(cwd, "❌ Not inside a git repository.")
    if head == base:
        raise PreconditionError(
            f"❌ Cannot create PR from {base} to itself.",
            recovery_hint="👉 Switch to a feature branch first.",
        )
    return open_pull_request(cwd, base, head, title)


def github_pr(cwd: Path, base: str | None, message: str | None) -> str:
    """Pull ``base``, install/build, commit, push, and open a pull request."""
    if not base or not message:
        raise UsageError("❌ Base branch and commit message are required.", usage=PR_USAGE)
    head = _require_branch(cwd, "❌ Not inside a git repository.")
    if head == base:
        raise PreconditionError(
            f"❌ Cannot create PR from {base} to itself.",
            recovery_hint="👉 Switch to a feature branch first.",
        )

    log.info(f"📥 Pulling latest from {base}...")
    result = git.pull(cwd, base)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Pull failed.",
            detail=exec_util.failure_detail(["git", "pull", "origin", base], result),
        )

    install_and_build(cwd)

    log.info("📦 Staging changes...")
    result = git.add_all(cwd)
    if not exec_util.succeeded(result):
        log.warning("⚠️ Staging failed; continuing.")

    log.info(f"📝 Committing with message: {message}")
    result = git.commit(cwd, message)
    if not exec_util.succeeded(result):
        log.warning("⚠️ Nothing to commit")

    log.info(f"🚀 Pushing to origin/{head}")
    result = git.push(cwd, head)
    if not exec_util.succeeded(result):
        raise StepFailedError(
            "❌ Push failed.",
            detail=exec_util.failure_detail(["git", "push", "origin", head], result),
        )

    return open_pull_request(cwd, base, head, message)
