"""Implementation for ``lazy react-native init``.

Creates the app with Expo or the React Native CLI, installs the selected
packages in one batch per dependency class and optionally writes NativeWind
config and a small stack-navigation starter.
"""

from __future__ import annotations

from pathlib import Path

from .. import log, project, prompts, templates
from ..models import (
    RN_METHOD_MENU,
    RN_PACKAGES,
    RN_SUMMARY_LABELS,
    ReactNativeOptions,
    collect_packages,
    options_from_answers,
    react_native_questions,
)
from ..packages import detect_package_manager
from ..project import ProjectContext

USAGE = "lazy react-native init [project-name]"
NAVIGATION_FILES = (
    ("src/screens/HomeScreen.js", "HomeScreen.js"),
    ("src/screens/ProfileScreen.js", "ProfileScreen.js"),
    ("src/navigation/AppNavigator.js", "AppNavigator.js"),
)


def generator_argv(project_name: str, options: ReactNativeOptions) -> list[str]:
    """Return the app generator invocation for the selected setup method.

    Example:
        >>> generator_argv("demo", ReactNativeOptions(method="expo", typescript=True))
        ['npx', 'create-expo-app', 'demo', '--template', 'blank-typescript']
        >>> generator_argv("demo", ReactNativeOptions(method="cli"))
        ['npx', '@react-native-community/cli@latest', 'init', 'demo']
    """
    if options.method == "cli":
        return ["npx", "@react-native-community/cli@latest", "init", project_name]
    template = "blank-typescript" if options.typescript else "blank"
    return ["npx", "create-expo-app", project_name, "--template", template]


def app_entry(options: ReactNativeOptions) -> str:
    """Return the entry component file the navigation starter replaces."""
    if options.method == "expo" and not options.typescript:
        return "App.js"
    return "App.tsx"


def setup_nativewind(ctx: ProjectContext) -> None:
    log.info("🌬️ Setting up NativeWind (Tailwind CSS for React Native)...")
    project.write_file(
        ctx, "tailwind.config.js", templates.read_template("react-native", "tailwind.config.js")
    )
    project.write_file(ctx, "global.css", templates.read_template("react-native", "global.css"))
    log.info("✅ NativeWind configured! Import './global.css' in your App component.")


def setup_navigation(ctx: ProjectContext, options: ReactNativeOptions) -> None:
    log.info("🧭 Setting up basic navigation structure...")
    for relpath, template in NAVIGATION_FILES:
        project.write_file(
            ctx, relpath, templates.render("react-native", template, project_name=ctx.name)
        )
    ctx.path("src", "components").mkdir(parents=True, exist_ok=True)
    entry = app_entry(options)
    project.write_file(ctx, entry, templates.read_template("react-native", entry))
    log.info(f"✅ Navigation wired into {entry}")


def print_run_instructions(project_name: str, options: ReactNativeOptions) -> None:
    log.info("")
    if options.method == "expo":
        log.info("🚀 Run your Expo app:")
        log.items([f"cd {project_name}", "npx expo start"])
        log.info("📱 Download the Expo Go app on your phone to test: https://expo.dev/client")
        return
    log.info("🚀 Run your React Native app:")
    log.items([f"cd {project_name}"])
    log.info("📱 iOS (requires Xcode and the iOS Simulator):")
    log.items(["npx react-native run-ios"])
    log.info("🤖 Android (requires Android Studio and an emulator):")
    log.items(["npx react-native run-android"])
    log.info("⚠️ Native toolchain setup: https://reactnative.dev/docs/environment-setup")


def print_summary(options: ReactNativeOptions) -> None:
    log.info("📁 Project structure:")
    structure: list[str] = []
    if options.navigation:
        structure += [
            "src/screens/ - App screens",
            "src/navigation/ - Navigation setup",
            "src/components/ - Reusable components",
        ]
    if options.nativewind:
        structure.append("global.css - Tailwind styles")
    structure.append(f"{app_entry(options)} - Main app component")
    log.items(structure)
    installed = [f"✓ {label}" for key, label in RN_SUMMARY_LABELS if getattr(options, key)]
    if installed:
        log.info("🛠️ Installed packages:")
        log.items(installed)


def react_native_init(cwd: Path, name: str | None = None) -> ProjectContext:
    """Create a React Native app in ``cwd / name``.

    Example:
        $ lazy react-native init demo
    """
    project_name = prompts.project_name(name, usage=USAGE)
    method = prompts.choose(RN_METHOD_MENU)
    package_manager = detect_package_manager()
    log.info(f"📦 Using package manager: {package_manager.value}")

    log.section(prompts.SMART_STACK_TITLE, prompts.SMART_STACK_SUBTITLE)
    answers = prompts.ask_sequence(react_native_questions(method))  # type: ignore[arg-type]
    options = options_from_answers(ReactNativeOptions, answers, method=method)

    log.info("")
    log.info(f"🚀 Creating React Native project with {method}...")
    project.run_generator(generator_argv(project_name, options), cwd=cwd)

    ctx = ProjectContext(root=cwd / project_name, package_manager=package_manager)
    project.install_dependencies(ctx)
    packages, dev_packages = collect_packages(options, RN_PACKAGES)
    project.add_packages(ctx, packages)
    project.add_packages(ctx, dev_packages, dev=True)

    if options.nativewind:
        setup_nativewind(ctx)
    if options.navigation:
        setup_navigation(ctx, options)

    print_run_instructions(project_name, options)
    log.info("")
    print_summary(options)
    project.finish(ctx, "✅ Your React Native app is ready to go! 🚀")
    return ctx
