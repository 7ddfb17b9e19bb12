import discord
from discord.ext import commands


class ErrorHandlerCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: Exception):
        if isinstance(error, (commands.CommandNotFound, commands.NoPrivateMessage)):
            return

        if isinstance(error, commands.MissingPermissions):
            return await ctx.reply("Only server administrators can use voice log commands.")

        if isinstance(error, commands.CommandInvokeError) and isinstance(error.original, discord.Forbidden):
            return await ctx.reply("I’m missing permissions (Send Messages / Embed Links) in this channel.")

        await ctx.reply(f"Command error: `{type(error).__name__}`")
        raise error
