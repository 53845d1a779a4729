"""Answer types, question tables and typed scaffolding options.

Each project type owns one ordered question table. Answers are collected into
an ``AnswerSet`` and converted into a frozen options object with one boolean
per question; generator flags and install lists are derived from those
options through the mapping tables below.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Literal, TypeVar


class Answer(str, Enum):
    YES = "yes"
    NO = "no"
    SKIP = "skip"


YES_NO_SKIP: Mapping[str, Answer] = {"1": Answer.YES, "0": Answer.NO, "-1": Answer.SKIP}
YES_NO: Mapping[str, Answer] = {"1": Answer.YES, "0": Answer.NO}
Y_N: Mapping[str, Answer] = {
    "y": Answer.YES,
    "yes": Answer.YES,
    "n": Answer.NO,
    "no": Answer.NO,
    "": Answer.NO,
}


class AnswerSet:
    """Ordered record of answers keyed by question key.

    Keys that were never asked read as ``Answer.NO``.

    Example:
        >>> answers = AnswerSet()
        >>> answers.record("zod", Answer.YES)
        >>> answers.is_yes("zod"), answers.is_yes("swr")
        (True, False)
    """

    def __init__(self) -> None:
        self._answers: dict[str, Answer] = {}

    def record(self, key: str, answer: Answer) -> None:
        self._answers[key] = answer

    def get(self, key: str) -> Answer:
        return self._answers.get(key, Answer.NO)

    def is_yes(self, key: str) -> bool:
        return self.get(key) is Answer.YES

    def keys(self) -> list[str]:
        return list(self._answers)

    def __contains__(self, key: object) -> bool:
        return key in self._answers

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={value.value}" for key, value in self._answers.items())
        return f"AnswerSet({body})"


@dataclass(frozen=True)
class Question:
    """One prompt in a sequence.

    Attributes:
        key: Answer key; matches a field of the project's options type.
        text: Prompt label.
        tokens: Accepted inputs mapped to answers.
        when: Optional predicate over earlier answers; the question is skipped
            (and reads as "no") when it returns false.
    """

    key: str
    text: str
    tokens: Mapping[str, Answer] = field(default_factory=lambda: YES_NO_SKIP)
    when: Callable[[AnswerSet], bool] | None = None

    def accepted(self) -> list[str]:
        return [token for token in self.tokens if token]

    def hint(self) -> str:
        """Return the token hint shown after the prompt text.

        Example:
            >>> Question("zod", "Install zod?").hint()
            '(1/0/-1)'
            >>> Question("dotenv", "Install dotenv?", tokens=Y_N).hint()
            '[y/N]'
        """
        if self.tokens is Y_N:
            return "[y/N]"
        return "(" + "/".join(self.accepted()) + ")"


@dataclass(frozen=True)
class Menu:
    """A numbered single-choice prompt."""

    key: str
    text: str
    options: tuple[tuple[str, str], ...]


OptionsT = TypeVar("OptionsT")


def options_from_answers(cls: type[OptionsT], answers: AnswerSet, **fixed: object) -> OptionsT:
    """Build an options object from answers; ``fixed`` supplies non-question fields."""
    values: dict[str, object] = dict(fixed)
    for option_field in fields(cls):  # type: ignore[arg-type]
        if option_field.name not in values:
            values[option_field.name] = answers.is_yes(option_field.name)
    return cls(**values)


@dataclass(frozen=True)
class PackageRule:
    """Packages installed when ``option`` is selected.

    ``applies`` narrows the rule further (for example to one framework).
    """

    option: str
    packages: tuple[str, ...] = ()
    dev_packages: tuple[str, ...] = ()
    applies: Callable[[object], bool] | None = None


def collect_packages(
    options: object, rules: tuple[PackageRule, ...]
) -> tuple[list[str], list[str]]:
    """Return ``(packages, dev_packages)`` selected by ``options``.

    Example:
        >>> opts = NodeTsOptions(nodemon=True, express=True, cors=False, dotenv=False)
        >>> collect_packages(opts, NODE_TS_PACKAGES)
        (['express'], ['@types/express', 'nodemon'])
    """
    packages: list[str] = []
    dev_packages: list[str] = []
    for rule in rules:
        if not getattr(options, rule.option):
            continue
        if rule.applies is not None and not rule.applies(options):
            continue
        packages.extend(item for item in rule.packages if item not in packages)
        dev_packages.extend(item for item in rule.dev_packages if item not in dev_packages)
    return packages, dev_packages


# Node.js

NODE_SETUP_MENU = Menu(
    key="setup",
    text="🤔 Choose setup",
    options=(("simple", "Basic JavaScript"), ("typescript", "TypeScript")),
)

NODE_SIMPLE_QUESTIONS: tuple[Question, ...] = (
    Question("dotenv", "➕ Install dotenv?", tokens=Y_N),
    Question("nodemon", "🌀 Use nodemon for auto-reload?", tokens=Y_N),
)


def node_ts_questions(*, include_express_cors: bool = True) -> tuple[Question, ...]:
    """Return the TypeScript setup questions.

    Example:
        >>> [q.key for q in node_ts_questions(include_express_cors=False)]
        ['nodemon', 'dotenv']
    """
    questions = [Question("nodemon", "➕ Install nodemon for development?")]
    if include_express_cors:
        questions.append(Question("express", "🌐 Install express?"))
        questions.append(Question("cors", "🔗 Install cors?"))
    questions.append(Question("dotenv", "🔐 Install dotenv?"))
    return tuple(questions)


@dataclass(frozen=True)
class NodeSimpleOptions:
    dotenv: bool = False
    nodemon: bool = False


@dataclass(frozen=True)
class NodeTsOptions:
    nodemon: bool = False
    express: bool = False
    cors: bool = False
    dotenv: bool = False


NODE_SIMPLE_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("dotenv", packages=("dotenv",)),
    PackageRule("nodemon", dev_packages=("nodemon",)),
)

NODE_TS_TOOLCHAIN: tuple[str, ...] = ("typescript", "@types/node", "ts-node")

NODE_TS_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("express", packages=("express",), dev_packages=("@types/express",)),
    PackageRule("cors", packages=("cors",), dev_packages=("@types/cors",)),
    PackageRule("dotenv", packages=("dotenv",)),
    PackageRule("nodemon", dev_packages=("nodemon",)),
)


# Next.js


@dataclass(frozen=True)
class NextOptions:
    typescript: bool = True
    eslint: bool = True
    tailwind: bool = True
    app_router: bool = True
    src_dir: bool = False
    import_alias: bool = True
    turbopack: bool = True


NEXT_DEFAULTS = NextOptions()

NEXT_DEFAULTS_SUMMARY: tuple[tuple[str, str], ...] = (
    ("typescript", "TypeScript"),
    ("eslint", "ESLint"),
    ("tailwind", "Tailwind CSS"),
    ("app_router", "App Router"),
    ("src_dir", "src/"),
    ("import_alias", "Import alias"),
    ("turbopack", "Turbopack"),
)

NEXT_ACCEPT_DEFAULTS = Question(
    "defaults", "✅ Continue with these defaults?", tokens=YES_NO
)

NEXT_MANUAL_QUESTIONS: tuple[Question, ...] = (
    Question("src_dir", "📂 Use src/ directory?", tokens=YES_NO),
    Question("tailwind", "✨ Use Tailwind CSS?", tokens=YES_NO),
    Question("eslint", "🧹 Use ESLint?", tokens=YES_NO),
    Question("typescript", "⚙️ Use TypeScript?", tokens=YES_NO),
    Question("app_router", "🧪 Use App Router?", tokens=YES_NO),
    Question("import_alias", "📌 Use import alias '@/*'?", tokens=YES_NO),
    Question("turbopack", "🚀 Use Turbopack for dev?", tokens=YES_NO),
)

# option -> (flags when selected, flags when not selected)
NEXT_FLAG_TABLE: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("typescript", ("--typescript",), ("--no-typescript",)),
    ("eslint", ("--eslint",), ("--no-eslint",)),
    ("tailwind", ("--tailwind",), ("--no-tailwind",)),
    ("app_router", ("--app",), ("--no-app",)),
    ("src_dir", ("--src-dir",), ("--no-src-dir",)),
    ("import_alias", ("--import-alias", "@/*"), ("--no-import-alias",)),
    ("turbopack", ("--turbo",), ("--no-turbo",)),
)


@dataclass(frozen=True)
class NextExtras:
    zod: bool = False
    bcrypt: bool = False
    js_cookie: bool = False
    swr: bool = False
    lucide_react: bool = False
    react_hot_toast: bool = False
    shadcn_ui: bool = False


NEXT_EXTRA_QUESTIONS: tuple[Question, ...] = (
    Question("zod", "➕ Install zod?"),
    Question("bcrypt", "🔐 Install bcrypt?"),
    Question("js_cookie", "🍪 Install js-cookie?"),
    Question("swr", "🔁 Install swr?"),
    Question("lucide_react", "✨ Install lucide-react icons?"),
    Question("react_hot_toast", "🔥 Install react-hot-toast?"),
    Question("shadcn_ui", "🎨 Setup shadcn-ui?"),
)

NEXT_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("zod", packages=("zod",)),
    PackageRule("bcrypt", packages=("bcrypt",)),
    PackageRule("js_cookie", packages=("js-cookie",)),
    PackageRule("swr", packages=("swr",)),
    PackageRule("lucide_react", packages=("lucide-react",)),
    PackageRule("react_hot_toast", packages=("react-hot-toast",)),
)


# Vite

ViteFramework = Literal["vanilla", "react", "vue", "svelte"]

VITE_FRAMEWORK_MENU = Menu(
    key="framework",
    text="✨ Choose a framework",
    options=(
        ("vanilla", "Vanilla"),
        ("react", "React"),
        ("vue", "Vue"),
        ("svelte", "Svelte"),
    ),
)


@dataclass(frozen=True)
class ViteOptions:
    framework: ViteFramework = "vanilla"
    axios: bool = False
    clsx: bool = False
    zod: bool = False
    react_hot_toast: bool = False
    lucide_react: bool = False
    tailwind: bool = False
    daisyui: bool = False


def vite_questions(framework: ViteFramework) -> tuple[Question, ...]:
    """Return the Vite package questions for ``framework``.

    Example:
        >>> [q.key for q in vite_questions("vue")]
        ['axios', 'clsx', 'zod', 'react_hot_toast', 'tailwind', 'daisyui']
    """
    questions = [
        Question("axios", "➕ Install axios?"),
        Question("clsx", "➕ Install clsx?"),
        Question("zod", "➕ Install zod?"),
        Question("react_hot_toast", "➕ Install react-hot-toast?"),
    ]
    if framework == "react":
        questions.append(Question("lucide_react", "➕ Install lucide-react?"))
    questions.append(Question("tailwind", "➕ Install Tailwind CSS?"))
    questions.append(
        Question(
            "daisyui",
            "➕ Install DaisyUI (Tailwind plugin)?",
            when=lambda answers: answers.is_yes("tailwind"),
        )
    )
    return tuple(questions)


VITE_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("axios", packages=("axios",)),
    PackageRule("clsx", packages=("clsx",)),
    PackageRule("zod", packages=("zod",)),
    PackageRule("react_hot_toast", packages=("react-hot-toast",)),
    PackageRule(
        "lucide_react",
        packages=("lucide-react",),
        applies=lambda options: getattr(options, "framework", None) == "react",
    ),
)

VITE_TAILWIND_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("tailwind", packages=("tailwindcss@latest", "@tailwindcss/vite@latest")),
    PackageRule("daisyui", packages=("daisyui@latest",)),
)


# React Native

RnMethod = Literal["expo", "cli"]

RN_METHOD_MENU = Menu(
    key="method",
    text="🛠️ Choose React Native setup method",
    options=(
        ("expo", "Expo (Recommended for beginners - easier setup, managed workflow)"),
        ("cli", "React Native CLI (Advanced - more control, native modules)"),
    ),
)


@dataclass(frozen=True)
class ReactNativeOptions:
    method: RnMethod = "expo"
    navigation: bool = False
    async_storage: bool = False
    vector_icons: bool = False
    redux: bool = False
    zustand: bool = False
    nativewind: bool = False
    rn_elements: bool = False
    hook_form: bool = False
    axios: bool = False
    react_query: bool = False
    date_fns: bool = False
    typescript: bool = False


def react_native_questions(method: RnMethod) -> tuple[Question, ...]:
    """Return the React Native package questions for ``method``.

    Example:
        >>> len(react_native_questions("expo")), len(react_native_questions("cli"))
        (12, 11)
    """
    questions = [
        Question("navigation", "➕ Install React Navigation (tab/stack navigation)?"),
        Question("async_storage", "➕ Install Async Storage (local data persistence)?"),
        Question("vector_icons", "➕ Install Vector Icons (icon library)?"),
        Question("redux", "➕ Install Redux Toolkit (state management)?"),
        Question("zustand", "➕ Install Zustand (lightweight state management)?"),
        Question("nativewind", "➕ Install NativeWind (Tailwind for React Native)?"),
        Question("rn_elements", "➕ Install React Native Elements (UI components)?"),
        Question("hook_form", "➕ Install React Hook Form (form handling)?"),
        Question("axios", "➕ Install Axios (HTTP client)?"),
        Question("react_query", "➕ Install React Query/TanStack Query (data fetching)?"),
        Question("date_fns", "➕ Install Date-fns (date utilities)?"),
    ]
    if method == "expo":
        questions.append(Question("typescript", "➕ Use the TypeScript template?"))
    return tuple(questions)


RN_NAVIGATION_PACKAGES = (
    "@react-navigation/native",
    "@react-navigation/native-stack",
    "@react-navigation/bottom-tabs",
    "react-native-screens",
    "react-native-safe-area-context",
)

RN_PACKAGES: tuple[PackageRule, ...] = (
    PackageRule("navigation", packages=RN_NAVIGATION_PACKAGES),
    PackageRule(
        "navigation",
        packages=("react-native-gesture-handler",),
        applies=lambda options: getattr(options, "method", None) == "cli",
    ),
    PackageRule("async_storage", packages=("@react-native-async-storage/async-storage",)),
    PackageRule("vector_icons", packages=("react-native-vector-icons",)),
    PackageRule("redux", packages=("@reduxjs/toolkit", "react-redux")),
    PackageRule("zustand", packages=("zustand",)),
    PackageRule("nativewind", packages=("nativewind",), dev_packages=("tailwindcss",)),
    PackageRule(
        "rn_elements",
        packages=("react-native-elements", "react-native-ratings", "react-native-slider"),
    ),
    PackageRule("hook_form", packages=("react-hook-form",)),
    PackageRule("axios", packages=("axios",)),
    PackageRule("react_query", packages=("@tanstack/react-query",)),
    PackageRule("date_fns", packages=("date-fns",)),
)

RN_SUMMARY_LABELS: tuple[tuple[str, str], ...] = (
    ("navigation", "React Navigation"),
    ("async_storage", "Async Storage"),
    ("vector_icons", "Vector Icons"),
    ("redux", "Redux Toolkit"),
    ("zustand", "Zustand"),
    ("nativewind", "NativeWind (Tailwind CSS)"),
    ("rn_elements", "React Native Elements"),
    ("hook_form", "React Hook Form"),
    ("axios", "Axios"),
    ("react_query", "React Query"),
    ("date_fns", "Date-fns"),
)


# Universal initializer

INIT_MENU = Menu(
    key="stack",
    text="🔧 Choose what to initialize",
    options=(
        ("next-js", "Next.js App"),
        ("vite-js", "Vite.js App"),
        ("react-native", "React Native App"),
        ("node-js", "Node.js Backend"),
        ("django", "Django Project"),
    ),
)
