"""
# Dinghy-Markdown: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the conversion logic.
"""

from typing import Optional

from dinghymd.bases import Replacement, ReplacementWithBlockGamut
from dinghymd.contexts import ConversionContext
from dinghymd.employables import (
    AmpersandAngleEncodingReplacement,
    AtxHeadingReplacement,
    AutoLinkReplacement,
    BlockQuoteReplacement,
    CodeBlockReplacement,
    CodeSpanReplacement,
    EmphasisReplacement,
    HardBreakReplacement,
    HorizontalRuleReplacement,
    HtmlBlockProtectionReplacement,
    InlineLinkReplacement,
    ListReplacement,
    NormalisationReplacement,
    ParagraphReplacement,
    PlaceholderUnprotectionReplacement,
    ReferenceDefinitionReplacement,
    ReferencedLinkReplacement,
    ReplacementSequence,
    SetextHeadingReplacement,
)


class ConversionAuthority:
    """
    Object governing the application of replacement rules.

    ## `legislate`

    Builds and commits the replacement queue:
    ````
    #normalise
    #protect-html-blocks
    #reference-definitions
    #block-gamut
        #setext-headings
        #atx-headings
        #horizontal-rules
        #code-blocks
        #span-gamut
            #code-spans
            #referenced-links
            #inline-links
            #auto-links
            #amps-and-angles
            #emphasis
            #hard-breaks
        #lists (re-enters #block-gamut)
        #blockquotes (re-enters #block-gamut)
        #protect-generated-html-blocks
        #paragraphs
    #placeholder-unprotect
    ````
    The order matters: later rules assume earlier ones have already normalised their input.

    ## `execute`

    Applies the legislated replacements with a fresh ConversionContext.
    Since committed replacements hold no per-conversion state,
    one authority may serve any number of conversions, concurrently or otherwise.
    """
    _replacement_from_id: dict[str, 'Replacement']
    _replacement_queue: list['Replacement']
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False):
        self._replacement_from_id = {}
        self._replacement_queue = []
        self._verbose_mode_enabled = verbose_mode_enabled
        self.legislate()

    @property
    def replacement_queue(self) -> list['Replacement']:
        return self._replacement_queue

    def get_replacement(self, id_: str) -> Optional['Replacement']:
        return self._replacement_from_id.get(id_)

    def declare(self, replacement: 'Replacement') -> 'Replacement':
        self._replacement_from_id[replacement.id_] = replacement
        return replacement

    def legislate(self):
        verbose_mode_enabled = self._verbose_mode_enabled

        span_gamut = self.declare(ReplacementSequence('span-gamut', verbose_mode_enabled))
        span_gamut.replacements = [
            self.declare(CodeSpanReplacement('code-spans', verbose_mode_enabled)),
            self.declare(ReferencedLinkReplacement('referenced-links', verbose_mode_enabled)),
            self.declare(InlineLinkReplacement('inline-links', verbose_mode_enabled)),
            self.declare(AutoLinkReplacement('auto-links', verbose_mode_enabled)),
            self.declare(AmpersandAngleEncodingReplacement('amps-and-angles', verbose_mode_enabled)),
            self.declare(EmphasisReplacement('emphasis', verbose_mode_enabled)),
            self.declare(HardBreakReplacement('hard-breaks', verbose_mode_enabled)),
        ]

        block_gamut = self.declare(ReplacementSequence('block-gamut', verbose_mode_enabled))
        block_gamut.replacements = [
            self.declare(SetextHeadingReplacement('setext-headings', verbose_mode_enabled)),
            self.declare(AtxHeadingReplacement('atx-headings', verbose_mode_enabled)),
            self.declare(HorizontalRuleReplacement('horizontal-rules', verbose_mode_enabled)),
            self.declare(CodeBlockReplacement('code-blocks', verbose_mode_enabled)),
            span_gamut,
            self.declare(ListReplacement('lists', verbose_mode_enabled)),
            self.declare(BlockQuoteReplacement('blockquotes', verbose_mode_enabled)),
            self.declare(HtmlBlockProtectionReplacement('protect-generated-html-blocks', verbose_mode_enabled)),
            self.declare(ParagraphReplacement('paragraphs', verbose_mode_enabled)),
        ]

        for replacement in self._replacement_from_id.values():
            if isinstance(replacement, ReplacementWithBlockGamut):
                replacement.block_gamut = block_gamut

        self._replacement_queue = [
            self.declare(NormalisationReplacement('normalise', verbose_mode_enabled)),
            self.declare(HtmlBlockProtectionReplacement('protect-html-blocks', verbose_mode_enabled)),
            self.declare(ReferenceDefinitionReplacement('reference-definitions', verbose_mode_enabled)),
            block_gamut,
            self.declare(PlaceholderUnprotectionReplacement('placeholder-unprotect', verbose_mode_enabled)),
        ]

        for replacement in self._replacement_from_id.values():
            replacement.commit()

    def execute(self, string: str) -> str:
        if self._verbose_mode_enabled:
            replacement_queue_ids = [
                f'#{replacement.id_}'
                for replacement in self._replacement_queue
            ]
            print(f'Replacement queue: {replacement_queue_ids}\n\n\n\n')

        context = ConversionContext.create()
        for replacement in self._replacement_queue:
            string = replacement.apply(string, context)

        return string  # HTML
