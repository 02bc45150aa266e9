from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.config import BOT_NAME

HELP_TEXT = (
    "🧭 *Commands*\n\n"
    "*Account*\n"
    "`/signup email username password`\n"
    "`/login email password`\n"
    "`/logout` · `/me`\n\n"
    "*Fans*\n"
    "`/explore` browse creators\n"
    "`/creator username` profile + posts\n"
    "`/subscribe username`\n"
    "`/tip username amount [message]`\n"
    "`/unlock username postId`\n"
    "`/like username postId`\n\n"
    "*Creators*\n"
    "`/apply Display Name free|subscription [price]`\n"
    "`/price free|subscription [price]`\n"
    "`/post free|ppv [price] title`\n"
    "`/editpost postId [free|ppv] [price] [title]`\n"
    "`/deletepost postId`\n"
    "`/earnings` · `/subscribers`"
)


async def start_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    message = update.effective_message
    if not message:
        return

    await message.reply_text(
        f"👋 *Welcome to {BOT_NAME}*\n\n"
        "Support your favourite creators directly:\n"
        "💳 Subscribe to their plans\n"
        "🔓 Unlock pay-per-view posts\n"
        "💸 Send tips\n\n"
        "Creators: apply with `/apply`, publish with `/post` and track money with `/earnings`.\n\n"
        "👉 Type `/explore` to start, or `/help` for every command.",
        parse_mode="Markdown",
    )


async def help_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    message = update.effective_message
    if not message:
        return
    await message.reply_text(HELP_TEXT, parse_mode="Markdown")
