# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0
