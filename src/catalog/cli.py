#!/usr/bin/env python3
"""
AppReferenceHub CLI

Command-line interface for browsing the catalog and, once logged in,
adding, editing and deleting applications.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional

from auth.session import AuthSession
from catalog.app_catalog import ApplicationCatalog
from catalog.images import describe_image, image_to_data_url
from catalog.seed import SAMPLE_IMAGES
from catalog.storage import JsonFileStorage
from common.config import HubConfig, load_config
from common.decorators import require_login
from common.exceptions import (
    ApplicationNotFoundError, HubError, NotAuthenticatedError, ValidationError,
)
from common.logging_config import setup_logging
from i18n.language import Language, LanguagePreference, Translator
from portal.forms import ApplicationForm
from portal.renderer import PageRenderer, write_page

logger = logging.getLogger(__name__)


def get_config(args) -> HubConfig:
    """Load configuration once per invocation, honouring --data-dir."""
    config = getattr(args, "_config", None)
    if config is None:
        config = load_config(getattr(args, "config", None))
        data_dir = getattr(args, "data_dir", None)
        if data_dir:
            config.data_dir = Path(data_dir).expanduser()
        args._config = config
    return config


def get_catalog(args) -> ApplicationCatalog:
    """Open the catalog configured for this invocation."""
    config = get_config(args)
    storage = JsonFileStorage(config.data_dir, config.storage_key)
    catalog = ApplicationCatalog(storage, strict=config.strict_storage)
    catalog.initialize()
    return catalog


def get_session(args) -> AuthSession:
    """Return the admin session."""
    config = get_config(args)
    return AuthSession(config.session_path, config.admin_email, config.admin_password)


def get_preference(args) -> LanguagePreference:
    config = get_config(args)
    return LanguagePreference(config.preference_path, Language.parse(config.default_language))


def get_translator(args) -> Translator:
    """Translator for --lang, else the saved preference."""
    lang = getattr(args, "lang", None)
    if lang:
        return Translator(Language.parse(lang))
    return Translator(get_preference(args).load())


def _resolve_image(args) -> Optional[str]:
    """Image value from --image, --image-file, --sample or --clear-image."""
    if getattr(args, "clear_image", False):
        return ""
    if getattr(args, "image_file", None):
        return image_to_data_url(args.image_file)
    sample = getattr(args, "sample", None)
    if sample is not None:
        if not 1 <= sample <= len(SAMPLE_IMAGES):
            raise ValidationError(
                {"image_url": f"sample must be between 1 and {len(SAMPLE_IMAGES)}"}
            )
        return SAMPLE_IMAGES[sample - 1]
    return getattr(args, "image", None)


def cmd_list(args):
    """List catalog applications."""
    catalog = get_catalog(args)
    t = get_translator(args).t

    applications = catalog.list()
    if not applications:
        print(t("admin.empty"))
        return 0

    print(f"{t('home.title')} ({len(applications)}):\n")
    for app in applications:
        print(f"  {app.id}")
        print(f"    {app.name}")
        if app.description:
            print(f"    {app.description[:80]}")
        print(f"    {app.link}")
        print()

    return 0


def cmd_show(args):
    """Show application details."""
    catalog = get_catalog(args)
    t = get_translator(args).t
    app = catalog.get(args.app_id)

    if not app:
        raise ApplicationNotFoundError(args.app_id)

    print(f"{t('app.form.name')}: {app.name}")
    print(f"ID: {app.id}")
    print(f"{t('app.form.description')}: {app.description}")
    print(f"{t('app.form.link')}: {app.link}")
    print(f"{t('app.form.image')}: {describe_image(app.image_url)}")
    print(f"{t('admin.column.created')}: {app.created_at}")

    return 0


def cmd_login(args):
    """Log in as the admin user."""
    session = get_session(args)
    t = get_translator(args).t

    try:
        user = session.login(args.email, args.password)
    except HubError:
        print(f"{t('login.failed')}: {t('login.error')}", file=sys.stderr)
        return 1

    print(f"{t('login.success')}: {user.email}")
    return 0


def cmd_logout(args):
    """End the admin session."""
    get_session(args).logout()
    print(get_translator(args).t("logout.success"))
    return 0


def cmd_whoami(args):
    """Show the logged-in user."""
    user = get_session(args).current_user()
    if user is None:
        print(get_translator(args).t("whoami.anonymous"))
        return 1
    print(user.email)
    return 0


@require_login(lambda args: get_session(args), operation="add applications")
def cmd_add(args):
    """Add a new application."""
    catalog = get_catalog(args)
    t = get_translator(args).t

    form = ApplicationForm(
        name=args.name,
        description=args.description,
        link=args.link,
        image_url=_resolve_image(args),
    )
    app = catalog.create(**form.to_create_kwargs())

    print(f"{t('toast.created')}: {app.name} ({app.id})")
    return 0


@require_login(lambda args: get_session(args), operation="edit applications")
def cmd_edit(args):
    """Edit an existing application."""
    catalog = get_catalog(args)
    t = get_translator(args).t

    form = ApplicationForm(
        name=args.name,
        description=args.description,
        link=args.link,
        image_url=_resolve_image(args),
    )
    patch = form.to_patch()
    if patch.is_empty():
        raise ValidationError({"fields": "give at least one field to change"})

    updated = catalog.update(args.app_id, patch)
    if updated is None:
        raise ApplicationNotFoundError(args.app_id)

    print(f"{t('toast.updated')}: {updated.name} ({updated.id})")
    return 0


@require_login(lambda args: get_session(args), operation="delete applications")
def cmd_delete(args):
    """Delete an application."""
    catalog = get_catalog(args)
    t = get_translator(args).t

    app = catalog.get(args.app_id)
    if not app:
        raise ApplicationNotFoundError(args.app_id)

    if not args.yes:
        answer = input(f"{app.name}: {t('admin.delete.confirm')} [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print(t("admin.delete.aborted"))
            return 0

    if not catalog.delete(args.app_id):
        raise ApplicationNotFoundError(args.app_id)

    print(f"{t('toast.deleted')}: {app.name}")
    return 0


def cmd_render(args):
    """Render the listing page, or the admin dashboard, to HTML."""
    config = get_config(args)
    catalog = get_catalog(args)
    translator = get_translator(args)
    renderer = PageRenderer([config.templates_dir])

    applications = catalog.list()
    if args.admin:
        user = get_session(args).current_user()
        if user is None:
            raise NotAuthenticatedError("view the admin dashboard")
        html = renderer.render_admin(applications, translator, user)
    else:
        html = renderer.render_home(applications, translator)

    if args.output:
        print(write_page(args.output, html))
    else:
        print(html)
    return 0


def cmd_lang(args):
    """Show or set the preferred language."""
    preference = get_preference(args)

    if args.language:
        preference.save(Language.parse(args.language))

    translator = Translator(preference.load())
    print(f"{translator.t('lang.current')}: {translator.code}")
    return 0


def cmd_samples(args):
    """List the sample image URLs usable with --sample."""
    print(f"{get_translator(args).t('app.form.samples')}:\n")
    for number, url in enumerate(SAMPLE_IMAGES, start=1):
        print(f"  {number}. {url}")
    return 0


def _add_image_options(parser: argparse.ArgumentParser, allow_clear: bool = False):
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--image", help="Image URL")
    group.add_argument("--image-file", help="Local image file to embed")
    group.add_argument("--sample", type=int, help="Use sample image N (see 'samples')")
    if allow_clear:
        group.add_argument("--clear-image", action="store_true", help="Remove the image")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refhub",
        description="AppReferenceHub catalog administration",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument("--data-dir", help="Directory holding the catalog")
    parser.add_argument("--config", help="Configuration file")
    parser.add_argument(
        "--log-json", action="store_true", help="Write logs as JSON lines"
    )
    parser.add_argument("--lang", choices=[l.value for l in Language], help="Interface language")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # list
    list_p = subparsers.add_parser("list", help="List applications")
    list_p.set_defaults(func=cmd_list)

    # show
    show_p = subparsers.add_parser("show", help="Show application details")
    show_p.add_argument("app_id", help="Application ID")
    show_p.set_defaults(func=cmd_show)

    # login
    login_p = subparsers.add_parser("login", help="Log in as admin")
    login_p.add_argument("--email", required=True)
    login_p.add_argument("--password", required=True)
    login_p.set_defaults(func=cmd_login)

    # logout
    logout_p = subparsers.add_parser("logout", help="Log out")
    logout_p.set_defaults(func=cmd_logout)

    # whoami
    whoami_p = subparsers.add_parser("whoami", help="Show the logged-in user")
    whoami_p.set_defaults(func=cmd_whoami)

    # add
    add_p = subparsers.add_parser("add", help="Add an application")
    add_p.add_argument("--name", required=True)
    add_p.add_argument("--description", required=True)
    add_p.add_argument("--link", required=True)
    _add_image_options(add_p)
    add_p.set_defaults(func=cmd_add)

    # edit
    edit_p = subparsers.add_parser("edit", help="Edit an application")
    edit_p.add_argument("app_id", help="Application ID")
    edit_p.add_argument("--name")
    edit_p.add_argument("--description")
    edit_p.add_argument("--link")
    _add_image_options(edit_p, allow_clear=True)
    edit_p.set_defaults(func=cmd_edit)

    # delete
    delete_p = subparsers.add_parser("delete", help="Delete an application")
    delete_p.add_argument("app_id", help="Application ID")
    delete_p.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    delete_p.set_defaults(func=cmd_delete)

    # render
    render_p = subparsers.add_parser("render", help="Render the site to HTML")
    render_p.add_argument("--admin", action="store_true", help="Render the admin dashboard")
    render_p.add_argument("-o", "--output", help="Write to file instead of stdout")
    render_p.set_defaults(func=cmd_render)

    # lang
    lang_p = subparsers.add_parser("lang", help="Show or set the preferred language")
    lang_p.add_argument("language", nargs="?", choices=[l.value for l in Language])
    lang_p.set_defaults(func=cmd_lang)

    # samples
    samples_p = subparsers.add_parser("samples", help="List sample images")
    samples_p.set_defaults(func=cmd_samples)

    return parser


def _report_error(args, error: HubError) -> None:
    try:
        t = get_translator(args).t
    except HubError:
        t = Translator(Language.EN).t

    if isinstance(error, NotAuthenticatedError):
        print(f"{t('toast.denied')}: {t('toast.denied.description')}", file=sys.stderr)
    elif isinstance(error, ApplicationNotFoundError):
        print(f"{t('toast.notfound')}: {error.details['app_id']}", file=sys.stderr)
    elif isinstance(error, ValidationError):
        print(f"{t('toast.error')}: {t('toast.error.description')}", file=sys.stderr)
        for field, reason in error.errors.items():
            print(f"  {field}: {reason}", file=sys.stderr)
    else:
        print(f"Error: {error.message}", file=sys.stderr)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = get_config(args)
        setup_logging(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            log_file=config.log_file,
            json_logs=args.log_json or config.json_logs,
        )
        return args.func(args)
    except HubError as e:
        logger.debug(f"{args.command} failed: {e}")
        _report_error(args, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
