# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Kana event stages
# stage 0: host-specific; deliver key events carrying kana code points and flags
# stage 1: classify each code point (kana.classify)
# stage 2: combine into morae, undo on backspace, flush on delimiters (combiner.KanaCombiner)
# stage 3: hand the resulting event chain back to the host (keystreams.CombineKana)
